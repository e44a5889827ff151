"""Tests for the root foldkit CLI."""

import pytest
from click.testing import CliRunner

from foldkit import __version__
from foldkit.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "foldkit" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_element_type_choice_validated(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--element-type", "complex", "reverse", "1"])
    assert result.exit_code == 2


EXPECTED_COMMANDS = ["fold", "map", "filter", "reverse", "pipeline", "laws"]


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"foldkit {command}" in result.output
