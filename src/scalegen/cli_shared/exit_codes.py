# topmark:header:start
#
#   project      : ScaleGen
#   file         : exit_codes.py
#   file_relpath : src/scalegen/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the ScaleGen CLI.

ScaleGen aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one deliberate divergence is
`VALIDATION_FAILED=2`, used when a schema generates fine but its validation report
is not clean. Click reports its own usage errors with the same code; those are
recognizable by the ``Usage:`` banner on stderr.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ScaleGen CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        VALIDATION_FAILED: The schema has undefined references, cycles or
            duplicate function names (``validate``, ``generate --strict``).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        SCHEMA_ERROR: The input is not valid JSON or not a valid schema.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration file cannot be read or parsed.
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    VALIDATION_FAILED = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    SCHEMA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
