"""Locate and read ``durctl.toml``.

Lookup order: the ``DURCTL_CONFIG`` env var, then a walk up from the
starting directory (the way git finds ``.git/``).  The ``--config`` flag
bypasses both and is handled by :meth:`DurSettings.from_cli`.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from durctl.config.models import DurConfig

CONFIG_FILENAME = "durctl.toml"
CONFIG_ENV_VAR = "DURCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    A ``DURCTL_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; malformed TOML becomes a ClickException naming the file."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def validate_sections(data: dict[str, Any], *, source: Path) -> DurConfig:
    """Check the ``[parser]``/``[output]`` tables of already-parsed TOML."""
    try:
        return DurConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid config in {source}:\n{exc}"
        raise click.ClickException(msg) from exc

