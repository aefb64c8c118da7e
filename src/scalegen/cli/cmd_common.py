# topmark:header:start
#
#   project      : ScaleGen
#   file         : cmd_common.py
#   file_relpath : src/scalegen/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands. They
avoid policy (exit code rules, messages) and only encapsulate plumbing: config
resolution, schema input and output writing, with library and OS errors mapped
onto [`scalegen.cli.errors`][scalegen.cli.errors].
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from scalegen.cli.console import get_console
from scalegen.cli.errors import (
    ScalegenConfigError,
    ScalegenFileNotFoundError,
    ScalegenIOError,
    ScalegenPermissionDeniedError,
    ScalegenSchemaError,
)
from scalegen.config.logging import get_logger
from scalegen.config.model import MutableConfig
from scalegen.core.errors import ConfigError, SchemaError
from scalegen.schema.loader import load_schema_text

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from scalegen.cli_shared.console_api import ConsoleLike
    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.schema.model import Schema

logger: ScalegenLogger = get_logger(__name__)

#: Path argument meaning STDIN (input) or STDOUT (output).
DASH: str = "-"


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the Click context (WARNING if unset)."""
    obj: Any = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", logging.WARNING))


def build_config(
    *,
    no_config: bool,
    config_paths: Iterable[str],
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Resolve the effective configuration for a command.

    Layers defaults, the discovered local config (unless ``no_config``), the
    explicit ``--config`` files and finally the CLI overrides.

    Raises:
        ScalegenConfigError: If a config file cannot be read or parsed.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_paths=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as e:
        raise ScalegenConfigError(str(e)) from e
    if overrides:
        draft.apply_cli_args(overrides)
    return draft.freeze()


def report_config_diagnostics(ctx: click.Context, config: Config) -> None:
    """Print the warnings recorded while loading config, unless output is quieted."""
    if get_effective_verbosity(ctx) >= logging.ERROR:
        return
    console: ConsoleLike = get_console(ctx)
    for diagnostic in config.diagnostics:
        console.warn(f"config: {diagnostic.message}")


def read_input_text(schema_path: str) -> str:
    """Return the text of ``schema_path``, or of STDIN when it is ``-``.

    Raises:
        ScalegenFileNotFoundError: If the file does not exist.
        ScalegenPermissionDeniedError: If the file cannot be read for lack of permissions.
        ScalegenIOError: On any other OS or decoding error.
    """
    if schema_path == DASH:
        logger.debug("Reading schema from STDIN")
        return click.get_text_stream("stdin").read()
    path = Path(schema_path)
    logger.debug("Reading schema from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError) as e:
        raise ScalegenFileNotFoundError(f"Schema file not found: {path}") from e
    except PermissionError as e:
        raise ScalegenPermissionDeniedError(f"Permission denied: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ScalegenIOError(f"Cannot read {path}: {e}") from e


def read_schema(schema_path: str) -> Schema:
    """Read and decode a schema document from a file or STDIN.

    Raises:
        ScalegenSchemaError: If the text is not valid JSON or not a valid schema.
    """
    text: str = read_input_text(schema_path)
    try:
        return load_schema_text(text)
    except SchemaError as e:
        source: str = "<stdin>" if schema_path == DASH else schema_path
        raise ScalegenSchemaError(f"{source}: {e}") from e


def write_output(text: str, output_path: str | None) -> None:
    """Write ``text`` to ``output_path``, or to STDOUT when it is ``None`` or ``-``.

    Raises:
        ScalegenPermissionDeniedError: If the file cannot be written for lack of permissions.
        ScalegenIOError: On any other OS error.
    """
    if output_path is None or output_path == DASH:
        click.echo(text, nl=False)
        return
    path = Path(output_path)
    try:
        path.write_text(text, encoding="utf-8")
    except PermissionError as e:
        raise ScalegenPermissionDeniedError(f"Permission denied: {path}") from e
    except OSError as e:
        raise ScalegenIOError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %d characters to %s", len(text), path)
