# topmark:header:start
#
#   project      : ScaleGen
#   file         : model.py
#   file_relpath : src/scalegen/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot used by the generation pipeline.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. Runtime defaults (``load_defaults_dict``).
    2. The first local config file found walking upward from the working
       directory (``scalegen.toml``, else ``[tool.scalegen]`` in ``pyproject.toml``),
       unless discovery is disabled.
    3. Explicit config files, in the order given.
    4. CLI / API overrides (``apply_cli_args``).

Immutability:
    - `Config` is ``frozen=True`` and stores tuples to prevent accidental mutation
      during a run. Use `Config.thaw` → edit → `MutableConfig.freeze` for updates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from scalegen.config.io import (
    get_bool_value_or_none_checked,
    get_string_list_value_or_none_checked,
    get_string_value_or_none_checked,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
)
from scalegen.config.keys import GENERATOR_KEYS, Toml
from scalegen.config.logging import get_logger
from scalegen.constants import PYPROJECT_TOML_NAME, SCALEGEN_TOML_NAME
from scalegen.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scalegen.config.io import TomlTable
    from scalegen.config.logging import ScalegenLogger

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: ScalegenLogger = get_logger(__name__)

_DEFAULTS: TomlTable = get_table_value(load_defaults_dict(), Toml.SECTION_GENERATOR)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ScaleGen.

    Attributes:
        registry_name (str): Registry variable referenced by generated codec constructors.
        api_name (str): Call-target variable referenced by generated stubs.
        rpc_prefix (str): Prefix of the RPC method invoked by stubs (``<prefix><method>``).
        target_param (str): Leading parameter of every generated stub.
        unit_name (str): Name of the unit type (the empty tuple).
        text_name (str): Name the ``str`` primitive resolves to.
        placeholder_prefix (str): Prefix of synthetic per-id names (``<prefix><id>``).
        result_prefix (str): Prefix of result wrapper names.
        option_prefix (str): Prefix of optional wrapper names.
        hash_aliases (tuple[str, ...]): Path names treated as fixed-width hash wrappers.
        include_imports (bool): Prepend an import preamble to the generated text.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
        diagnostics (FrozenDiagnosticLog): Warnings recorded while loading config.
    """

    registry_name: str = _DEFAULTS[Toml.KEY_REGISTRY_NAME]
    api_name: str = _DEFAULTS[Toml.KEY_API_NAME]
    rpc_prefix: str = _DEFAULTS[Toml.KEY_RPC_PREFIX]
    target_param: str = _DEFAULTS[Toml.KEY_TARGET_PARAM]
    unit_name: str = _DEFAULTS[Toml.KEY_UNIT_NAME]
    text_name: str = _DEFAULTS[Toml.KEY_TEXT_NAME]
    placeholder_prefix: str = _DEFAULTS[Toml.KEY_PLACEHOLDER_PREFIX]
    result_prefix: str = _DEFAULTS[Toml.KEY_RESULT_PREFIX]
    option_prefix: str = _DEFAULTS[Toml.KEY_OPTION_PREFIX]
    hash_aliases: tuple[str, ...] = tuple(_DEFAULTS[Toml.KEY_HASH_ALIASES])
    include_imports: bool = _DEFAULTS[Toml.KEY_INCLUDE_IMPORTS]
    config_files: tuple[Path, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime-default configuration (no file discovery)."""
        return MutableConfig.from_defaults().freeze()

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict.

        Provenance (``config_files``) and diagnostics are not part of the
        external schema and are therefore omitted.
        """
        return {
            Toml.SECTION_GENERATOR: {
                Toml.KEY_REGISTRY_NAME: self.registry_name,
                Toml.KEY_API_NAME: self.api_name,
                Toml.KEY_RPC_PREFIX: self.rpc_prefix,
                Toml.KEY_TARGET_PARAM: self.target_param,
                Toml.KEY_UNIT_NAME: self.unit_name,
                Toml.KEY_TEXT_NAME: self.text_name,
                Toml.KEY_PLACEHOLDER_PREFIX: self.placeholder_prefix,
                Toml.KEY_RESULT_PREFIX: self.result_prefix,
                Toml.KEY_OPTION_PREFIX: self.option_prefix,
                Toml.KEY_HASH_ALIASES: list(self.hash_aliases),
                Toml.KEY_INCLUDE_IMPORTS: self.include_imports,
            }
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen configuration."""
        diagnostics = DiagnosticLog()
        diagnostics.extend(self.diagnostics)
        return MutableConfig(
            registry_name=self.registry_name,
            api_name=self.api_name,
            rpc_prefix=self.rpc_prefix,
            target_param=self.target_param,
            unit_name=self.unit_name,
            text_name=self.text_name,
            placeholder_prefix=self.placeholder_prefix,
            result_prefix=self.result_prefix,
            option_prefix=self.option_prefix,
            hash_aliases=list(self.hash_aliases),
            include_imports=self.include_imports,
            config_files=list(self.config_files),
            diagnostics=diagnostics,
        )


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Every option is tri-state: ``None`` means "inherit from the lower layer".
    `freeze` fills any remaining ``None`` from the runtime defaults.
    """

    registry_name: str | None = None
    api_name: str | None = None
    rpc_prefix: str | None = None
    target_param: str | None = None
    unit_name: str | None = None
    text_name: str | None = None
    placeholder_prefix: str | None = None
    result_prefix: str | None = None
    option_prefix: str | None = None
    hash_aliases: list[str] | None = None
    include_imports: bool | None = None

    config_files: list[Path] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------

    def freeze(self) -> Config:
        """Freeze this mutable builder into an immutable `Config`."""

        def _pick(value: Any, key: str) -> Any:
            return value if value is not None else _DEFAULTS[key]

        return Config(
            registry_name=_pick(self.registry_name, Toml.KEY_REGISTRY_NAME),
            api_name=_pick(self.api_name, Toml.KEY_API_NAME),
            rpc_prefix=_pick(self.rpc_prefix, Toml.KEY_RPC_PREFIX),
            target_param=_pick(self.target_param, Toml.KEY_TARGET_PARAM),
            unit_name=_pick(self.unit_name, Toml.KEY_UNIT_NAME),
            text_name=_pick(self.text_name, Toml.KEY_TEXT_NAME),
            placeholder_prefix=_pick(self.placeholder_prefix, Toml.KEY_PLACEHOLDER_PREFIX),
            result_prefix=_pick(self.result_prefix, Toml.KEY_RESULT_PREFIX),
            option_prefix=_pick(self.option_prefix, Toml.KEY_OPTION_PREFIX),
            hash_aliases=tuple(_pick(self.hash_aliases, Toml.KEY_HASH_ALIASES)),
            include_imports=bool(_pick(self.include_imports, Toml.KEY_INCLUDE_IMPORTS)),
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    # ---------------------------- Loading ----------------------------

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        source: str = "defaults",
    ) -> MutableConfig:
        """Build a `MutableConfig` from a parsed TOML table.

        Unknown keys and wrongly typed values are recorded as warnings in the
        builder's diagnostic log; the affected options are left unset.

        Args:
            data (TomlTable): Parsed TOML (root of ``scalegen.toml`` or the
                ``[tool.scalegen]`` table of ``pyproject.toml``).
            source (str): Human-readable origin used in warning messages.

        Returns:
            MutableConfig: The populated builder.
        """
        draft = cls()
        generator: TomlTable = get_table_value(data, Toml.SECTION_GENERATOR)
        where: str = f"{source}: {Toml.SECTION_GENERATOR}"

        for key in sorted(set(generator) - GENERATOR_KEYS):
            message: str = f"[{where}] unknown key {key!r} ignored"
            logger.warning(message)
            draft.diagnostics.add_warning(message)

        def _string(key: str) -> str | None:
            return get_string_value_or_none_checked(
                generator, key, where=where, diagnostics=draft.diagnostics
            )

        draft.registry_name = _string(Toml.KEY_REGISTRY_NAME)
        draft.api_name = _string(Toml.KEY_API_NAME)
        draft.rpc_prefix = _string(Toml.KEY_RPC_PREFIX)
        draft.target_param = _string(Toml.KEY_TARGET_PARAM)
        draft.unit_name = _string(Toml.KEY_UNIT_NAME)
        draft.text_name = _string(Toml.KEY_TEXT_NAME)
        draft.placeholder_prefix = _string(Toml.KEY_PLACEHOLDER_PREFIX)
        draft.result_prefix = _string(Toml.KEY_RESULT_PREFIX)
        draft.option_prefix = _string(Toml.KEY_OPTION_PREFIX)
        draft.hash_aliases = get_string_list_value_or_none_checked(
            generator, Toml.KEY_HASH_ALIASES, where=where, diagnostics=draft.diagnostics
        )
        draft.include_imports = get_bool_value_or_none_checked(
            generator, Toml.KEY_INCLUDE_IMPORTS, where=where, diagnostics=draft.diagnostics
        )
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``scalegen.toml`` and ``pyproject.toml`` files, extracting the
        ``[tool.scalegen]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The builder, or ``None`` when a ``pyproject.toml``
            has no ``[tool.scalegen]`` section.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_section: TomlTable = get_table_value(
                get_table_value(toml_data, Toml.SECTION_TOOL), Toml.SECTION_SCALEGEN
            )
            if not tool_section:
                logger.debug("[tool.scalegen] section missing in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, source=str(path))
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_local_config_file(cls, start: Path) -> MutableConfig | None:
        """Return the nearest local configuration walking upward from ``start``.

        In each directory ``scalegen.toml`` wins over ``pyproject.toml``; a
        ``pyproject.toml`` without a ``[tool.scalegen]`` table is skipped.

        Args:
            start (Path): Directory where the search starts.

        Returns:
            MutableConfig | None: The first configuration found, or ``None``.
        """
        current: Path = start.resolve()
        for directory in (current, *current.parents):
            for name in (SCALEGEN_TOML_NAME, PYPROJECT_TOML_NAME):
                candidate: Path = directory / name
                if not candidate.is_file():
                    continue
                draft: MutableConfig | None = cls.from_toml_file(candidate)
                if draft is not None:
                    logger.info("Using local config file %s", candidate)
                    return draft
        return None

    @classmethod
    def load_merged(
        cls,
        *,
        config_paths: Iterable[Path] = (),
        no_config: bool = False,
        start: Path | None = None,
    ) -> MutableConfig:
        """Return defaults merged with discovered and explicit config files.

        Args:
            config_paths (Iterable[Path]): Explicit config files, applied in order
                on top of the discovered local configuration.
            no_config (bool): Skip discovery of local config files.
            start (Path | None): Discovery start directory (default: the CWD).

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).

        Raises:
            ConfigError: If any config file cannot be read or parsed.
        """
        merged: MutableConfig = cls.from_defaults()
        if not no_config:
            local: MutableConfig | None = cls.discover_local_config_file(start or Path.cwd())
            if local is not None:
                merged = merged.merge_with(local)
        for path in config_paths:
            extra: MutableConfig | None = cls.from_toml_file(path)
            if extra is None:
                message: str = f"{path}: no [tool.scalegen] section, file ignored"
                logger.warning(message)
                merged.diagnostics.add_warning(message)
                continue
            merged = merged.merge_with(extra)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where ``other``'s set options override ours.

        Provenance lists and diagnostics are concatenated in layer order.
        """
        diagnostics = DiagnosticLog()
        diagnostics.extend(self.diagnostics)
        diagnostics.extend(other.diagnostics)

        def _over(mine: Any, theirs: Any) -> Any:
            return theirs if theirs is not None else mine

        return MutableConfig(
            registry_name=_over(self.registry_name, other.registry_name),
            api_name=_over(self.api_name, other.api_name),
            rpc_prefix=_over(self.rpc_prefix, other.rpc_prefix),
            target_param=_over(self.target_param, other.target_param),
            unit_name=_over(self.unit_name, other.unit_name),
            text_name=_over(self.text_name, other.text_name),
            placeholder_prefix=_over(self.placeholder_prefix, other.placeholder_prefix),
            result_prefix=_over(self.result_prefix, other.result_prefix),
            option_prefix=_over(self.option_prefix, other.option_prefix),
            hash_aliases=_over(self.hash_aliases, other.hash_aliases),
            include_imports=_over(self.include_imports, other.include_imports),
            config_files=[*self.config_files, *other.config_files],
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI / API overrides in place and return ``self``.

        Only keys present with a non-``None`` value override the current layer;
        unknown keys are ignored so callers can pass a wider namespace.

        Args:
            args (ArgsLike): Mapping of option names (the `Config` attribute names)
                to values.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        for key in GENERATOR_KEYS:
            value: Any = args.get(key)
            if value is None:
                continue
            if key == Toml.KEY_HASH_ALIASES:
                self.hash_aliases = [str(v) for v in value]
            elif key == Toml.KEY_INCLUDE_IMPORTS:
                self.include_imports = bool(value)
            else:
                setattr(self, key, str(value))
        return self
