# topmark:header:start
#
#   project      : ScaleGen
#   file         : version.py
#   file_relpath : src/scalegen/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen `version` command.

Prints the current ScaleGen version as installed in the active Python environment.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import click

from scalegen.cli.cli_types import EnumChoiceParam, OutputFormat
from scalegen.cli.cmd_common import get_effective_verbosity
from scalegen.constants import SCALEGEN_VERSION

if TYPE_CHECKING:
    from scalegen.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of ScaleGen.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ScaleGen.

    Args:
        output_format (OutputFormat | None): Optional output format (text when ``None``).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": SCALEGEN_VERSION}))
    elif get_effective_verbosity(ctx) <= logging.INFO:
        console.print(console.styled("ScaleGen version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(SCALEGEN_VERSION, bold=True)}")
    else:
        console.print(console.styled(SCALEGEN_VERSION, bold=True))
