"""Tests for the root ilp-plugin-shared CLI."""

from click.testing import CliRunner

from ilp_plugin_shared import __version__
from ilp_plugin_shared.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "ilp-plugin-shared" in result.output
    assert "validate" in result.output
    assert "normalize" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_validate_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["validate", "--examples"])
    assert result.exit_code == 0
    assert "validate transfer" in result.output
