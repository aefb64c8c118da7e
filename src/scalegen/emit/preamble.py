# topmark:header:start
#
#   project      : ScaleGen
#   file         : preamble.py
#   file_relpath : src/scalegen/emit/preamble.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Import preamble for generated code."""

from __future__ import annotations

from scalegen.constants import CODEC_IMPORTS
from scalegen.emit.templates import render_imports


def import_preamble() -> str:
    """Return the import block naming every codec class generated code may use."""
    return render_imports(CODEC_IMPORTS)
