# topmark:header:start
#
#   project      : ScaleGen
#   file         : dump_config.py
#   file_relpath : src/scalegen/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScaleGen `dump-config` command.

Emits the effective ScaleGen configuration as TOML after applying defaults,
project config files and any ``--config`` files. The output is wrapped
between `# === BEGIN ===` and `# === END ===` markers for easy parsing in
tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scalegen.cli.cmd_common import build_config, report_config_diagnostics
from scalegen.cli.options import CONTEXT_SETTINGS, common_config_options
from scalegen.config.io.render import to_toml
from scalegen.config.logging import get_logger

if TYPE_CHECKING:
    from scalegen.cli_shared.console_api import ConsoleLike
    from scalegen.config.logging import ScalegenLogger
    from scalegen.config.model import Config

logger: ScalegenLogger = get_logger(__name__)

BEGIN_MARKER: str = "# === BEGIN ==="
END_MARKER: str = "# === END ==="


@click.command(
    name="dump-config",
    help="Dump the final merged ScaleGen configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
def dump_config_command(*, no_config: bool, config_paths: tuple[str, ...]) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config (bool): If True, skip discovery of local configuration files.
        config_paths (tuple[str, ...]): Additional TOML config files to merge.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config(no_config=no_config, config_paths=config_paths)
    report_config_diagnostics(ctx, config)
    logger.trace("Merged config: %s", config)

    console.print(BEGIN_MARKER)
    console.print(to_toml(config.to_toml_dict()), nl=False)
    console.print(END_MARKER)
