"""Tests for the name CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from regcheck.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestNameCommand:
    def test_valid_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["name", "O'Brien-Smith"])
        assert result.exit_code == 0
        assert "OK" in result.stdout
        assert "O'Brien-Smith" in result.stdout

    def test_invalid_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["name", "Jane_Doe"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.stderr
        assert "invalid characters" in result.stderr

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "name", "Mary Jane"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "check_name"
        assert data["data"]["value"] == "Mary Jane"

    def test_json_error_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "name", "John123"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_NAME"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "name", "Mary"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: check_name"

    def test_max_length_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "regcheck.toml").write_text("[name]\nmax_length = 4\n")
        result = cli_runner.invoke(cli, ["name", "Maria"])
        assert result.exit_code == 1
        assert "at most 4" in result.stderr
