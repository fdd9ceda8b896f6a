"""Tests for the root regcheck CLI."""

import pytest
from click.testing import CliRunner

from regcheck import __version__
from regcheck.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "regcheck" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
@pytest.mark.parametrize("command", ["validate", "register", "regions"])
def test_commands_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0


@pytest.mark.usefixtures("_isolated_cwd")
def test_examples_flag(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["validate", "--examples"])
    assert result.exit_code == 0
    assert "regcheck validate" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_config_value_is_reported(cli_runner: CliRunner, tmp_path) -> None:
    (tmp_path / "regcheck.toml").write_text('[lookup]\nregions = { Mars = "space" }\n')
    result = cli_runner.invoke(cli, ["regions"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
