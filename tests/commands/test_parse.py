"""Tests for the parse CLI command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from durctl.cli import cli


@pytest.mark.usefixtures("workdir")
class TestParseCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "PT2.5H"])
        assert result.exit_code == 0
        assert "parse_duration" in result.output
        assert "hours" in result.output
        assert "30" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "P1Y1M1DT1H1M1.1S"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "parse_duration"
        assert data["data"]["duration"] == {
            "is_negative": False,
            "years": 1,
            "months": 1,
            "weeks": 0,
            "days": 1,
            "hours": 1,
            "minutes": 1,
            "seconds": 1,
            "milliseconds": 100,
            "microseconds": 0,
            "nanoseconds": 0,
        }

    def test_negative_after_double_dash(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "--", "-P1Y1M"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["duration"]["is_negative"] is True

    def test_invalid_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "PT1.5H1.5M"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "fractional_unit" in result.output

    def test_invalid_json_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "P"])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "INVALID_DURATION"
        assert data["error"]["detail"]["reason"] == "empty"

    def test_lenient(self, cli_runner: CliRunner) -> None:
        strict = cli_runner.invoke(cli, ["parse", "P1D junk"])
        assert strict.exit_code == 1

        result = cli_runner.invoke(cli, ["--json", "parse", "--lenient", "P1D junk"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["warnings"] == ["Ignored trailing input ' junk'"]

    def test_batch(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "P1D", "PT36H"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "parse_batch"
        assert [i["duration"]["hours"] for i in data["data"]["items"]] == [0, 36]

    def test_batch_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "P1D", "nonsense"])
        assert result.exit_code == 1

    def test_batch_partial(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--partial", "P1D", "nonsense"])
        assert result.exit_code == 0
        assert "errors: 1" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "parse", "P1D"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: parse_duration"

    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "parse", "P1D"])
        assert result.exit_code == 0
        assert "DurationService.parse" in result.output
        assert "grammar" in result.output

    def test_requires_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse"])
        assert result.exit_code == 2


class TestParseWithConfig:
    def test_config_allows_empty(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[parser]\nallow_empty = true\n")
        result = cli_runner.invoke(cli, ["parse", "P"])
        assert result.exit_code == 0
        assert "(zero duration)" in result.output

    def test_config_shows_zero_fields(
        self, cli_runner: CliRunner, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[output]\nshow_zero_fields = true\n")
        result = cli_runner.invoke(cli, ["parse", "P1D"])
        assert result.exit_code == 0
        assert "nanoseconds" in result.output

    def test_explicit_config_flag(self, cli_runner: CliRunner, workdir: Path) -> None:
        custom = workdir / "alt.toml"
        custom.write_text("[parser]\nallow_trailing = true\n")
        result = cli_runner.invoke(cli, ["-c", str(custom), "parse", "P1Dzzz"])
        assert result.exit_code == 0
