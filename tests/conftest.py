"""Shared pytest fixtures for durctl tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from durctl.config.settings import DurSettings
from durctl.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's DURCTL_* environment out of the tests."""
    monkeypatch.delenv("DURCTL_CONFIG", raising=False)
    monkeypatch.delenv("DURCTL_PARSER__ALLOW_TRAILING", raising=False)
    monkeypatch.delenv("DURCTL_PARSER__ALLOW_EMPTY", raising=False)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to an empty temp directory so no stray durctl.toml is found."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> DurSettings:
    """Default settings resolved from an empty working directory."""
    return DurSettings.from_cli(start=workdir)


@pytest.fixture
def write_config(workdir: Path) -> Callable[[str], Path]:
    """Write a durctl.toml into the working directory."""

    def _write(content: str) -> Path:
        path = workdir / "durctl.toml"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """The CLI enables telemetry on --verbose; never leak it across tests."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None]:
    """CLI invocations attach a handler bound to the runner's stderr; drop it afterwards."""
    yield
    logging.getLogger().handlers.clear()
    logging.getLogger("durctl").setLevel(logging.NOTSET)
