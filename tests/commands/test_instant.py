"""Tests for the instant CLI command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from durctl.cli import cli
from durctl.domain.instant import NS_MAX


@pytest.mark.usefixtures("workdir")
class TestInstantCommand:
    def test_from_millis(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "instant", "from-millis", "1700000000000"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["epoch_nanoseconds"] == 1_700_000_000_000_000_000
        assert data["epoch_milliseconds"] == 1_700_000_000_000

    def test_from_nanos_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "instant", "from-nanos", "--", "-1"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["epoch_milliseconds"] == -1

    def test_out_of_range(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["instant", "from-nanos", str(NS_MAX + 1)])
        assert result.exit_code == 1
        assert "outside the representable range" in result.output

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["instant", "from-millis", "5"])
        assert result.exit_code == 0
        assert "epoch_nanoseconds: 5000000" in result.output

    def test_not_an_integer(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["instant", "from-millis", "soon"])
        assert result.exit_code == 2
