"""Tests for the check CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from lenguard.cli import cli

CLEF = "\U0001d11e"


@pytest.mark.usefixtures("isolated_dir")
class TestCheckCommand:
    def test_pass(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "hello", "--min", "1", "--max", "10"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: simple"

    def test_fail_goes_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", CLEF, "--policy", "bytes", "--min", "1", "--max", "3"]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "expected length between 1 and 3, got 4" in result.stderr

    def test_chars_policy(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", CLEF, "--policy", "chars", "--min", "1", "--max", "1"]
        )
        assert result.exit_code == 0

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "abc", "--max", "2"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["policy"] == "simple"
        assert data["error"]["actual"] == 3

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "abc", "--max", "3"])
        assert result.stdout.strip() == "OK"

    def test_hex_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", "--hex", "deadbeef", "--policy", "bytes", "--max", "4"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["ok"] is True

    def test_invalid_hex(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--hex", "zz", "--max", "4"])
        assert result.exit_code == 2

    def test_chars_list(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "héllo", "--chars-list", "--policy", "chars", "--min", "5", "--max", "5"]
        )
        assert result.exit_code == 0

    def test_hex_and_chars_list_conflict(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "00", "--hex", "--chars-list", "--max", "1"])
        assert result.exit_code == 2

    def test_unsupported_policy_for_bytes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "--hex", "00", "--policy", "chars", "--max", "1"]
        )
        assert result.exit_code == 1
        assert result.stderr == "Error: 'bytes' does not support the 'chars' length policy\n"

    def test_max_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "abc"])
        assert result.exit_code == 2

    def test_negative_bound_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "abc", "--min", "-1", "--max", "3"])
        assert result.exit_code == 2

    def test_default_policy_from_config(self, cli_runner: CliRunner, isolated_dir: Path) -> None:
        (isolated_dir / "lenguard.toml").write_text('[check]\ndefault_policy = "chars"\n')
        result = cli_runner.invoke(cli, ["check", "€", "--min", "1", "--max", "1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "OK: chars"

    def test_hash_collections_flag_does_not_affect_text(
        self, cli_runner: CliRunner, isolated_dir: Path
    ) -> None:
        (isolated_dir / "lenguard.toml").write_text("[adapters]\nhash_collections = true\n")
        result = cli_runner.invoke(cli, ["check", "€", "--min", "3", "--max", "3"])
        assert result.exit_code == 0
