# topmark:header:start
#
#   project      : ScaleGen
#   file         : errors.py
#   file_relpath : src/scalegen/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Engine-level exceptions for ScaleGen.

These exceptions are raised by the library layers (schema loading, configuration)
and are free of any CLI dependency. The CLI maps them onto Click exceptions with
sysexits-aligned exit codes in [`scalegen.cli.errors`][scalegen.cli.errors].

Note:
    The generation core (name resolution, ordering, emission) never raises for
    data-shape reasons: unknown references get placeholder names and cycles are
    broken gracefully. Only the schema loader raises `SchemaError`.
"""

from __future__ import annotations


class ScalegenError(Exception):
    """Base class for all ScaleGen library errors."""


class SchemaError(ScalegenError):
    """Raised when the input schema does not have the expected structure.

    Attributes:
        location (str): JSON-pointer-like location of the offending value
            (e.g. ``"/types/3/def"``), or ``""`` for the document root.
    """

    def __init__(self, message: str, *, location: str = "") -> None:
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class ConfigError(ScalegenError):
    """Raised when a configuration file cannot be read or parsed."""
