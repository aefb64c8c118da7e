# topmark:header:start
#
#   project      : ScaleGen
#   file         : test_generate_command.py
#   file_relpath : tests/cli/test_generate_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `generate` command input, output, config and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from scalegen import api
from scalegen.cli_shared.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_SUCCESS,
    assert_VALIDATION_FAILED,
    run_cli,
    run_cli_in,
    write_schema,
)
from tests.conftest import composite, function, mark_cli, prim, sequence

if TYPE_CHECKING:
    from pathlib import Path

CLEAN_SCHEMA: dict[str, Any] = {
    "types": [prim(0, "u32"), sequence(1, 0), composite(2, [{"name": "items", "type": 1}], path=["Bag"])],
    "functions": [function("get_bag", [0], 2)],
}

BROKEN_SCHEMA: dict[str, Any] = {
    "types": [composite(1, [{"name": "x", "type": 42}], path=["Holder"])],
    "functions": [],
}


@mark_cli
def test_generate_from_file_to_stdout(tmp_path: Path) -> None:
    """The generated text on stdout equals the API output."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    result = run_cli(["--no-color", "generate", "--no-config", str(path)])

    assert_SUCCESS(result)
    assert result.output == api.generate(CLEAN_SCHEMA)


@mark_cli
def test_generate_from_stdin() -> None:
    """``-`` (the default) reads the schema from STDIN."""
    result = run_cli(["--no-color", "generate", "--no-config"], input_text=json.dumps(CLEAN_SCHEMA))

    assert_SUCCESS(result)
    assert "export const Vecu32 = Vec.with(u32);" in result.output
    assert "export async function get_bag(nucleusId: string, idArg: any): Promise<any> {" in result.output


@mark_cli
def test_generate_to_output_file(tmp_path: Path) -> None:
    """``--output`` writes the file and keeps stdout empty."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    out = tmp_path / "generated.ts"
    result = run_cli(["--no-color", "generate", "--no-config", str(path), "-o", str(out)])

    assert_SUCCESS(result)
    assert result.output == ""
    assert out.read_text(encoding="utf-8") == api.generate(CLEAN_SCHEMA)


@mark_cli
def test_include_imports_flag_overrides_config(tmp_path: Path) -> None:
    """The flag wins over ``include_imports`` from a config file, in both directions."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    (tmp_path / "scalegen.toml").write_text("[generator]\ninclude_imports = true\n", encoding="utf-8")

    from_config = run_cli_in(tmp_path, ["--no-color", "generate", "schema.json"])
    disabled = run_cli_in(tmp_path, ["--no-color", "generate", "schema.json", "--no-include-imports"])
    enabled = run_cli(["--no-color", "generate", "--no-config", str(path), "--include-imports"])

    assert_SUCCESS(from_config)
    assert_SUCCESS(disabled)
    assert_SUCCESS(enabled)
    assert from_config.output.startswith("import { Text, ")
    assert disabled.output.startswith("export const Vecu32")
    assert enabled.output == from_config.output


@mark_cli
def test_explicit_config_file(tmp_path: Path) -> None:
    """``--config`` files rename identifiers used in generated stubs."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    cfg = tmp_path / "custom.toml"
    cfg.write_text('[generator]\napi_name = "client"\n', encoding="utf-8")

    result = run_cli(["--no-color", "generate", "--no-config", "--config", str(cfg), str(path)])

    assert_SUCCESS(result)
    assert "  if (!client) throw new Error('API not initialized');" in result.output


@mark_cli
def test_findings_are_reported_but_not_fatal(tmp_path: Path) -> None:
    """Without ``--strict`` undefined references only produce warnings."""
    path = write_schema(tmp_path, BROKEN_SCHEMA)
    result = run_cli(["--no-color", "generate", "--no-config", str(path)])

    assert_SUCCESS(result)
    assert "    x: Type42,\n" in result.output
    assert "warning: type 42 is referenced but not defined; named Type42" in result.output


@mark_cli
def test_quiet_suppresses_findings(tmp_path: Path) -> None:
    """``-q`` keeps only the generated text."""
    path = write_schema(tmp_path, BROKEN_SCHEMA)
    result = run_cli(["--no-color", "-q", "generate", "--no-config", str(path)])

    assert_SUCCESS(result)
    assert result.output == api.generate(BROKEN_SCHEMA)


@mark_cli
def test_strict_fails_on_findings_but_still_writes(tmp_path: Path) -> None:
    """``--strict`` exits with VALIDATION_FAILED after writing the output."""
    path = write_schema(tmp_path, BROKEN_SCHEMA)
    out = tmp_path / "out.ts"
    result = run_cli(["--no-color", "generate", "--no-config", "--strict", str(path), "-o", str(out)])

    assert_VALIDATION_FAILED(result)
    assert out.read_text(encoding="utf-8") == api.generate(BROKEN_SCHEMA)


@mark_cli
def test_strict_passes_on_clean_schema(tmp_path: Path) -> None:
    """A clean schema under ``--strict`` succeeds."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    assert_SUCCESS(run_cli(["--no-color", "generate", "--no-config", "--strict", str(path)]))


@mark_cli
def test_empty_schema_generates_nothing() -> None:
    """An empty document writes no text."""
    result = run_cli(["--no-color", "generate", "--no-config"], input_text="{}")

    assert_SUCCESS(result)
    assert result.output == ""


@mark_cli
def test_missing_schema_file(tmp_path: Path) -> None:
    """A missing schema file exits with FILE_NOT_FOUND."""
    result = run_cli(["--no-color", "generate", "--no-config", str(tmp_path / "nope.json")])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Schema file not found" in result.output


@mark_cli
def test_invalid_json_schema() -> None:
    """Undecodable input exits with SCHEMA_ERROR and names the source."""
    result = run_cli(["--no-color", "generate", "--no-config"], input_text="{ nope")

    assert result.exit_code == ExitCode.SCHEMA_ERROR, result.output
    assert "<stdin>: invalid JSON" in result.output


@mark_cli
def test_structurally_invalid_schema(tmp_path: Path) -> None:
    """A schema error reports the JSON location."""
    path = write_schema(tmp_path, {"types": [{"id": 1, "def": {"tuple": ["x"]}}]})
    result = run_cli(["--no-color", "generate", "--no-config", str(path)])

    assert result.exit_code == ExitCode.SCHEMA_ERROR, result.output
    assert "/types/0/def/tuple/0" in result.output


@mark_cli
def test_invalid_config_file(tmp_path: Path) -> None:
    """An unparseable ``--config`` file exits with CONFIG_ERROR."""
    path = write_schema(tmp_path, CLEAN_SCHEMA)
    cfg = tmp_path / "broken.toml"
    cfg.write_text("[generator\n", encoding="utf-8")

    result = run_cli(["--no-color", "generate", "--no-config", "--config", str(cfg), str(path)])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Invalid TOML" in result.output


@mark_cli
def test_config_warnings_are_printed(tmp_path: Path) -> None:
    """Unknown config keys are reported with a ``config:`` prefix."""
    write_schema(tmp_path, CLEAN_SCHEMA)
    (tmp_path / "scalegen.toml").write_text("[generator]\nflavour = 1\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--no-color", "generate", "schema.json"])

    assert_SUCCESS(result)
    assert "config: " in result.output
    assert "unknown key 'flavour' ignored" in result.output
