"""Tests for the root lenguard CLI."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from lenguard import __version__
from lenguard.cli import cli

pytestmark = pytest.mark.usefixtures("isolated_dir")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "lenguard" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_commands_registered() -> None:
    assert set(cli.commands) == {"check", "measure", "adapters"}


def test_missing_config_file_falls_back_to_defaults(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "nope.toml", "check", "abc", "--max", "3"])
    assert result.exit_code == 0


def test_invalid_toml(cli_runner: CliRunner, isolated_dir: Path) -> None:
    (isolated_dir / "lenguard.toml").write_text("[check\n")
    result = cli_runner.invoke(cli, ["check", "abc", "--max", "3"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
