# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/validation/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Post-hoc consistency report over a schema."""

from __future__ import annotations

from scalegen.validation.report import ValidationReport, build_validation_report

__all__ = ["ValidationReport", "build_validation_report"]
