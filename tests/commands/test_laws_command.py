"""Tests for the laws command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from foldkit.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestLawsCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "laws", "3", "1", "2"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "laws"
        assert data["data"]["all_hold"] is True
        assert all(law["holds"] for law in data["data"]["laws"])

    def test_human_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["laws", "1", "2"])
        assert result.exit_code == 0
        assert "reverse_involution" in result.output
        assert "all laws hold" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "laws", "1"])
        assert result.output.strip() == "ok"

    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "laws"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["count"] == 0

    def test_strings(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "--element-type", "str", "laws", "a", "b"])
        assert json.loads(result.output)["data"]["all_hold"] is True

    def test_nan_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--element-type", "float", "-q", "laws", "nan"])
        assert result.exit_code == 0
        assert result.output.strip() == "ok"
        assert "WARNING" not in result.output
