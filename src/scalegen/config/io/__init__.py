# topmark:header:start
#
#   project      : ScaleGen
#   file         : __init__.py
#   file_relpath : src/scalegen/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for ScaleGen configuration.

This package centralizes helpers for reading, validating, and writing TOML used by
ScaleGen's configuration layer. Keeping these utilities separate helps avoid import
cycles and keeps the model classes small and focused.

TOML parsing/formatting:
    ScaleGen uses `tomlkit` for both parsing and rendering.

Typical flow:
    1. Load defaults (``load_defaults_dict``).
    2. Load project/user TOML files (``load_toml_dict``).
    3. Read values with checked getters that record warnings.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
)
from .guards import get_table_value, is_any_list, is_str_list, is_toml_table
from .loaders import load_defaults_dict, load_toml_dict
from .render import clean_toml, to_toml
from .types import TomlTable

__all__ = [
    "TomlTable",
    "clean_toml",
    "get_bool_value_or_none_checked",
    "get_string_list_value_or_none_checked",
    "get_string_value_or_none_checked",
    "get_table_value",
    "is_any_list",
    "is_str_list",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
