# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic building blocks shared by the engine, API and CLI layers.

Modules:
    - `scalegen.core.errors`: engine-level exception hierarchy.
    - `scalegen.core.enum_mixins`: typing-friendly Enum introspection helpers.
"""

from __future__ import annotations
