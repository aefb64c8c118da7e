# topmark:header:start
#
#   project      : ScaleGen
#   file         : generate.py
#   file_relpath : src/scalegen/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen `generate` command.

Reads a schema document (file or STDIN), generates the type definitions and
function stubs, and writes them to STDOUT or to ``--output``. Validation
findings are printed to STDERR; with ``--strict`` they also make the command
exit with `ExitCode.VALIDATION_FAILED` (the text is written regardless).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import click

from scalegen import api
from scalegen.cli.cmd_common import (
    build_config,
    get_effective_verbosity,
    read_schema,
    report_config_diagnostics,
    write_output,
)
from scalegen.cli.options import CONTEXT_SETTINGS, common_config_options, schema_argument
from scalegen.cli_shared.exit_codes import ExitCode
from scalegen.config.keys import Toml
from scalegen.config.logging import get_logger
from scalegen.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from scalegen.cli_shared.console_api import ConsoleLike
    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config
    from scalegen.schema.model import Schema

logger: ScalegenLogger = get_logger(__name__)


@click.command(
    name="generate",
    help=(
        "Generate TypeScript codec definitions and RPC stubs from a schema. "
        "SCHEMA is a JSON file, or '-' (default) to read from STDIN."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@schema_argument
@click.option(
    "-o",
    "--output",
    "output_path",
    metavar="FILE",
    default=None,
    help="Write the generated code to FILE instead of STDOUT.",
)
@common_config_options
@click.option(
    "--include-imports/--no-include-imports",
    "include_imports",
    default=None,
    help="Prepend (or omit) the import preamble; overrides the config value.",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Log the generation run at DEBUG level on STDERR.",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Exit with status 2 when the schema has undefined references, cycles "
    "or duplicate function names.",
)
def generate_command(
    *,
    schema_path: str,
    output_path: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
    include_imports: bool | None,
    debug: bool,
    strict: bool,
) -> None:
    """Generate code for one schema.

    Args:
        schema_path (str): Schema file path, or ``-`` for STDIN.
        output_path (str | None): Output file, or ``None`` for STDOUT.
        no_config (bool): Skip discovery of local config files.
        config_paths (tuple[str, ...]): Additional config files to merge.
        include_imports (bool | None): Override for the ``include_imports`` setting.
        debug (bool): Enable DEBUG logging for the run.
        strict (bool): Fail when the validation report is not clean.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    overrides: dict[str, Any] = {Toml.KEY_INCLUDE_IMPORTS: include_imports}
    config: Config = build_config(
        no_config=no_config, config_paths=config_paths, overrides=overrides
    )
    report_config_diagnostics(ctx, config)

    schema: Schema = read_schema(schema_path)
    logger.info("Loaded schema: %d type(s), %d function(s)", len(schema), len(schema.functions))

    result: api.GenerationResult = api.generate_with_report(schema, config=config, debug=debug)
    write_output(result.text, output_path)

    if get_effective_verbosity(ctx) < logging.ERROR:
        for diagnostic in result.report.diagnostics:
            if diagnostic.level is DiagnosticLevel.INFO:
                continue
            console.warn(f"{diagnostic.level.value}: {diagnostic.message}")

    if strict and not result.report.is_clean:
        logger.info("Validation report is not clean; exiting with %s", ExitCode.VALIDATION_FAILED)
        ctx.exit(ExitCode.VALIDATION_FAILED)
