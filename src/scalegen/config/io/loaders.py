# topmark:header:start
#
#   project      : ScaleGen
#   file         : loaders.py
#   file_relpath : src/scalegen/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading ScaleGen configuration from:
- the runtime defaults defined in code, and
- on-disk TOML files (`scalegen.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from scalegen.config.keys import Toml
from scalegen.config.logging import get_logger
from scalegen.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from scalegen.config.logging import ScalegenLogger

    from .types import TomlTable

logger: ScalegenLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ScaleGen's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**: defaults are defined in
    code so ScaleGen can operate without any configuration file.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults. The
        returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_GENERATOR: {
            Toml.KEY_REGISTRY_NAME: "registry",
            Toml.KEY_API_NAME: "api",
            Toml.KEY_RPC_PREFIX: "nucleus_",
            Toml.KEY_TARGET_PARAM: "nucleusId",
            Toml.KEY_UNIT_NAME: "Null",
            Toml.KEY_TEXT_NAME: "Text",
            Toml.KEY_PLACEHOLDER_PREFIX: "Type",
            Toml.KEY_RESULT_PREFIX: "CustomResult",
            Toml.KEY_OPTION_PREFIX: "CustomOption",
            Toml.KEY_HASH_ALIASES: ["H160", "H256", "H512"],
            Toml.KEY_INCLUDE_IMPORTS: False,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``scalegen.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content as plain Python containers.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
