# topmark:header:start
#
#   project      : ScaleGen
#   file         : keys.py
#   file_relpath : src/scalegen/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ScaleGen configuration.

This module defines the authoritative string constants used when reading,
writing, and validating ScaleGen configuration from TOML sources
(``scalegen.toml`` and ``[tool.scalegen]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ScaleGen configuration.

    The ordering of constants mirrors the runtime defaults returned by
    `scalegen.config.io.load_defaults_dict` to make schema changes easy to audit.
    """

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_SCALEGEN: Final[str] = "scalegen"

    # [generator]
    SECTION_GENERATOR: Final[str] = "generator"

    # Names used inside generated code
    KEY_REGISTRY_NAME: Final[str] = "registry_name"
    KEY_API_NAME: Final[str] = "api_name"
    KEY_RPC_PREFIX: Final[str] = "rpc_prefix"
    KEY_TARGET_PARAM: Final[str] = "target_param"

    # Naming scheme
    KEY_UNIT_NAME: Final[str] = "unit_name"
    KEY_TEXT_NAME: Final[str] = "text_name"
    KEY_PLACEHOLDER_PREFIX: Final[str] = "placeholder_prefix"
    KEY_RESULT_PREFIX: Final[str] = "result_prefix"
    KEY_OPTION_PREFIX: Final[str] = "option_prefix"

    # Shape detection
    KEY_HASH_ALIASES: Final[str] = "hash_aliases"

    # Output
    KEY_INCLUDE_IMPORTS: Final[str] = "include_imports"


# Keys of the [generator] table that hold strings, in declaration order.
GENERATOR_STRING_KEYS: Final[tuple[str, ...]] = (
    Toml.KEY_REGISTRY_NAME,
    Toml.KEY_API_NAME,
    Toml.KEY_RPC_PREFIX,
    Toml.KEY_TARGET_PARAM,
    Toml.KEY_UNIT_NAME,
    Toml.KEY_TEXT_NAME,
    Toml.KEY_PLACEHOLDER_PREFIX,
    Toml.KEY_RESULT_PREFIX,
    Toml.KEY_OPTION_PREFIX,
)

GENERATOR_KEYS: Final[frozenset[str]] = frozenset(
    GENERATOR_STRING_KEYS + (Toml.KEY_HASH_ALIASES, Toml.KEY_INCLUDE_IMPORTS)
)
