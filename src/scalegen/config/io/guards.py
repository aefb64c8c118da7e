# topmark:header:start
#
#   project      : ScaleGen
#   file         : guards.py
#   file_relpath : src/scalegen/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and normalization helpers for TOML parsing.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from scalegen.config.logging import get_logger

if TYPE_CHECKING:
    from scalegen.config.logging import ScalegenLogger

    from .types import TomlTable


logger: ScalegenLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not validated)."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a ``list[str]`` value."""
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table stored under ``key``, or an empty dict.

    Args:
        table (TomlTable): Table to query.
        key (str): Sub-table name.

    Returns:
        TomlTable: The sub-table, or ``{}`` when missing or not a table.
    """
    value: Any | None = table.get(key)
    if is_toml_table(value):
        return value
    if value is not None:
        logger.debug("Expected table for key %s, got %r; using {}", key, value)
    return {}
