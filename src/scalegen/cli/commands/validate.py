# topmark:header:start
#
#   project      : ScaleGen
#   file         : validate.py
#   file_relpath : src/scalegen/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen `validate` command.

Checks a schema for undefined references, dependency cycles and duplicate
function names without generating code. Exits with `ExitCode.SUCCESS` when the
report is clean and with `ExitCode.VALIDATION_FAILED` otherwise.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from scalegen import api
from scalegen.cli.cli_types import EnumChoiceParam, OutputFormat
from scalegen.cli.cmd_common import (
    build_config,
    get_effective_verbosity,
    read_schema,
    report_config_diagnostics,
)
from scalegen.cli.options import CONTEXT_SETTINGS, common_config_options, schema_argument
from scalegen.cli_shared.exit_codes import ExitCode
from scalegen.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from scalegen.cli_shared.console_api import ConsoleLike
    from scalegen.config.model import Config
    from scalegen.schema.model import Schema
    from scalegen.validation.report import ValidationReport


def render_report_text(report: ValidationReport, console: ConsoleLike, *, verbosity: int) -> None:
    """Print a human-readable report: one line per finding, then a summary."""
    for diagnostic in report.diagnostics:
        if diagnostic.level is DiagnosticLevel.INFO and verbosity > logging.INFO:
            continue
        label: str = console.styled(
            diagnostic.level.value,
            fg={"info": "blue", "warning": "yellow", "error": "bright_red"}[
                diagnostic.level.value
            ],
        )
        console.print(f"{label}: {diagnostic.message}")
    summary: str = f"{report.type_count} type(s), {report.function_count} function(s)"
    if report.is_clean:
        console.print(console.styled(f"OK: {summary}", fg="green", bold=True))
    else:
        n_warning: int = report.diagnostics.stats().n_warning
        console.print(
            console.styled(f"{n_warning} issue(s) found: {summary}", fg="yellow", bold=True)
        )


@click.command(
    name="validate",
    help=(
        "Check a schema for undefined references, dependency cycles and duplicate "
        "function names. SCHEMA is a JSON file, or '-' (default) to read from STDIN."
    ),
    context_settings=CONTEXT_SETTINGS,
)
@schema_argument
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def validate_command(
    *,
    schema_path: str,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None,
) -> None:
    """Validate one schema and print its report.

    Args:
        schema_path (str): Schema file path, or ``-`` for STDIN.
        no_config (bool): Skip discovery of local config files.
        config_paths (tuple[str, ...]): Additional config files to merge.
        output_format (OutputFormat | None): Report format (text when ``None``).
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config(no_config=no_config, config_paths=config_paths)
    report_config_diagnostics(ctx, config)
    schema: Schema = read_schema(schema_path)

    report: ValidationReport = api.validate(schema, config=config)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps(report.to_dict(), indent=2))
    else:
        render_report_text(report, console, verbosity=get_effective_verbosity(ctx))

    if not report.is_clean:
        ctx.exit(ExitCode.VALIDATION_FAILED)
