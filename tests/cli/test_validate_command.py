# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_validate_command.py
#   file_relpath : tests/cli/test_validate_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `validate` command text and JSON reports."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from scalegen.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_SUCCESS,
    assert_VALIDATION_FAILED,
    run_cli,
    write_schema,
)
from tests.conftest import composite, function, mark_cli, prim

if TYPE_CHECKING:
    from pathlib import Path

CLEAN: dict[str, Any] = {
    "types": [prim(0, "u8"), composite(1, [{"type": 0}], path=["One"])],
    "functions": [function("ping", [], 1)],
}

CYCLIC: dict[str, Any] = {
    "types": [composite(1, [{"type": 2}], path=["A"]), composite(2, [{"type": 1}], path=["B"])],
    "functions": [function("f", [], 1), function("f", [], 2)],
}


@mark_cli
def test_clean_schema_text_report(tmp_path: Path) -> None:
    """A clean schema prints an OK summary and exits 0."""
    path = write_schema(tmp_path, CLEAN)
    result = run_cli(["--no-color", "validate", "--no-config", str(path)])

    assert_SUCCESS(result)
    assert result.output.strip() == "OK: 2 type(s), 1 function(s)"


@mark_cli
def test_verbose_text_report_includes_info(tmp_path: Path) -> None:
    """With ``-v`` the info summary diagnostic is listed too."""
    path = write_schema(tmp_path, CLEAN)
    result = run_cli(["--no-color", "-v", "validate", "--no-config", str(path)])

    assert_SUCCESS(result)
    assert "info: 2 type(s), 1 function(s)" in result.output


@mark_cli
def test_findings_text_report(tmp_path: Path) -> None:
    """Cycles and duplicate functions are listed and fail the command."""
    path = write_schema(tmp_path, CYCLIC)
    result = run_cli(["--no-color", "validate", "--no-config", str(path)])

    assert_VALIDATION_FAILED(result)
    lines = result.output.strip().splitlines()
    assert lines[0].startswith("warning: type 1 (A) is part of a dependency cycle")
    assert "warning: function 'f' is declared 2 times" in lines
    assert lines[-1] == "3 issue(s) found: 2 type(s), 2 function(s)"


@mark_cli
def test_json_report(tmp_path: Path) -> None:
    """``--format json`` prints the report dictionary."""
    path = write_schema(tmp_path, CYCLIC)
    result = run_cli(["validate", "--no-config", "--format", "json", str(path)])

    assert_VALIDATION_FAILED(result)
    payload = json.loads(result.output)
    assert payload["clean"] is False
    assert payload["cycle_broken_ids"] == [1, 2]
    assert payload["duplicate_function_names"] == ["f"]
    assert payload["diagnostic_counts"] == {"info": 1, "warning": 3, "error": 0}


@mark_cli
def test_validate_stdin_schema_error() -> None:
    """Structural errors in STDIN input exit with SCHEMA_ERROR."""
    result = run_cli(["--no-color", "validate", "--no-config", "-"], input_text='{"types": 3}')

    assert result.exit_code == ExitCode.SCHEMA_ERROR, result.output
    assert "<stdin>: /types: expected an array, got int" in result.output
