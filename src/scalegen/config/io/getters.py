# topmark:header:start
#
#   project      : ScaleGen
#   file         : getters.py
#   file_relpath : src/scalegen/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Checked value getters for TOML config tables.

The getters validate the expected shape and record **warnings** in a
`DiagnosticLog` (and also log a warning) so that user mistakes are surfaced
without crashing or changing defaulting behavior: a wrongly typed value is
reported and treated as absent (``None``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from scalegen.config.logging import get_logger

from .guards import is_str_list

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger
    from scalegen.diagnostic.model import DiagnosticLog

    from .types import TomlTable

logger: ScalegenLogger = get_logger(__name__)


def _warn(diagnostics: DiagnosticLog, where: str, key: str, expected: str, value: Any) -> None:
    message: str = f"[{where}] {key}: expected {expected}, got {type(value).__name__} ({value!r})"
    logger.warning(message)
    diagnostics.add_warning(message)


def get_string_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Extract an optional string value, recording a warning on a type mismatch.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Section label used in the warning (e.g. ``"generator"``).
        diagnostics (DiagnosticLog): Log receiving warnings.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _warn(diagnostics, where, key, "a string", value)
    return None


def get_bool_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Extract an optional boolean value, recording a warning on a type mismatch.

    Integers are **not** coerced: TOML has a native boolean type.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _warn(diagnostics, where, key, "a boolean", value)
    return None


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Extract an optional list of strings, recording a warning on a type mismatch.

    Returns:
        list[str] | None: A shallow copy of the list, or ``None`` when absent or
        when any item is not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if is_str_list(value):
        return list(value)
    _warn(diagnostics, where, key, "a list of strings", value)
    return None
