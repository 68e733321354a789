"""Tests for the measure CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from lenguard.cli import cli


@pytest.mark.usefixtures("isolated_dir")
class TestMeasureCommand:
    def test_text(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "measure", "naïve"])
        assert result.exit_code == 0
        rows = {row["policy"]: row["length"] for row in json.loads(result.stdout)}
        assert rows == {"bytes": 6, "chars": 5, "simple": 6}

    def test_hex_has_no_chars(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "measure", "--hex", "00ff"])
        rows = {row["policy"]: row["length"] for row in json.loads(result.stdout)}
        assert rows == {"bytes": 2, "chars": None, "simple": 2}

    def test_chars_list_has_no_bytes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "measure", "abc", "--chars-list"])
        rows = {row["policy"]: row["length"] for row in json.loads(result.stdout)}
        assert rows == {"bytes": None, "chars": 3, "simple": 3}

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["measure", "abc"])
        assert result.exit_code == 0
        assert "str" in result.stdout
        assert "bytes" in result.stdout
