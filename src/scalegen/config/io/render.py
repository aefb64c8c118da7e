# topmark:header:start
#
#   project      : ScaleGen
#   file         : render.py
#   file_relpath : src/scalegen/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration dicts as TOML text using `tomlkit`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

if TYPE_CHECKING:
    from .types import TomlTable


def clean_toml(data: TomlTable) -> TomlTable:
    """Return a copy of ``data`` without ``None`` values (TOML has no null).

    Nested tables are cleaned recursively; empty tables are kept.
    """
    out: TomlTable = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, dict):
            nested: dict[str, Any] = value
            out[key] = clean_toml(nested)
        else:
            out[key] = value
    return out


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML-compatible dict to TOML text.

    Args:
        data (TomlTable): The table to serialize. ``None`` values are dropped.

    Returns:
        str: TOML document text.
    """
    return tomlkit.dumps(clean_toml(data))
