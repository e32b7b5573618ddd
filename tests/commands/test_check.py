"""Tests for the ``check`` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from fluentval.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestCheckCommand:
    def test_no_rules_passes(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "anything"])
        assert result.exit_code == 0
        assert "OK  anything" in result.output

    def test_sample_rules_reject_foo(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["check", "foo", "--not-empty", "--max-length", "20", "--not-equals", "foo"]
        )
        assert result.exit_code == 1
        assert "Value must not be foo." in result.output

    def test_min_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "ab", "--min-length", "3"])
        assert result.exit_code == 1
        assert "greater than or equal to 3 but was 2." in result.output

    def test_equals(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "x", "--equals", "y"])
        assert result.exit_code == 1
        assert "Value was expected to be y but was x." in result.output

    def test_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "", "--empty"])
        assert result.exit_code == 0

    def test_not_empty_overrides_min_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "a", "--min-length", "5", "--not-empty"])
        assert result.exit_code == 0

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", "bar", "--max-length", "5"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"ok": True, "value": "bar"}

    def test_quiet_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", "bar"])
        assert result.exit_code == 0
        assert result.output.strip() == "bar"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "--examples"])
        assert result.exit_code == 0
        assert "fluentval check" in result.output
