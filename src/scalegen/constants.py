# topmark:header:start
#
#   project      : ScaleGen
#   file         : constants.py
#   file_relpath : src/scalegen/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

SCALEGEN_VERSION: str = get_version("scalegen")

# Local configuration file names, in discovery precedence order:
SCALEGEN_TOML_NAME: Final[str] = "scalegen.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: Final[str] = "SCALEGEN_LOG_LEVEL"

# Primitive lexicon: SCALE primitive name -> Polkadot.js codec name.
# Unknown primitive names pass through unchanged.
PRIMITIVE_NAMES: Final[dict[str, str]] = {
    "str": "Text",
    "bool": "bool",
    "u8": "u8",
    "u16": "u16",
    "u32": "u32",
    "u64": "u64",
    "u128": "u128",
    "i8": "i8",
    "i16": "i16",
    "i32": "i32",
    "i64": "i64",
    "i128": "i128",
}

# Fixed-width hash aliases and their width in bytes.
HASH_ALIAS_WIDTHS: Final[dict[str, int]] = {
    "H160": 20,
    "H256": 32,
    "H512": 64,
}

# Codec classes referenced by generated code (import preamble order).
CODEC_IMPORTS: Final[tuple[str, ...]] = (
    "Text",
    "u8",
    "u16",
    "u32",
    "u64",
    "u128",
    "i8",
    "i16",
    "i32",
    "i64",
    "i128",
    "bool",
    "Null",
    "Enum",
    "Result",
    "Vec",
    "Tuple",
    "Option",
    "Struct",
    "Bytes",
    "U8aFixed",
    "VecFixed",
)

VALUE_NOT_SET: str = "<not set>"
