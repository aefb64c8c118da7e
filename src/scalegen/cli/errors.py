# topmark:header:start
#
#   project      : ScaleGen
#   file         : errors.py
#   file_relpath : src/scalegen/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ScaleGen CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors
    ([`SchemaError`][scalegen.core.errors.SchemaError],
    [`ConfigError`][scalegen.core.errors.ConfigError]) are mapped onto them in
    [`scalegen.cli.cmd_common`][scalegen.cli.cmd_common].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from scalegen.cli_shared.exit_codes import ExitCode


class ScalegenCliError(click.ClickException):
    """Base class for all ScaleGen CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Unlike Click's default, this method does not add color; colorization is
        applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ScalegenUsageError(ScalegenCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ScalegenConfigError(ScalegenCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ScalegenSchemaError(ScalegenCliError):
    """Error for schema input that is not valid JSON or lacks the schema structure."""

    exit_code = ExitCode.SCHEMA_ERROR


class ScalegenFileNotFoundError(ScalegenCliError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ScalegenPermissionDeniedError(ScalegenCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class ScalegenIOError(ScalegenCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR
