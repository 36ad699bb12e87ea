"""DurSettings: CLI flags, ``DURCTL_*`` env vars and ``durctl.toml`` merged once.

Precedence, highest first: keyword arguments from Click, environment
variables (``DURCTL_PARSER__ALLOW_EMPTY=true`` reaches into a section),
the TOML file, then the defaults on the section models.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from durctl.config.discovery import find_config, read_toml, validate_sections
from durctl.config.models import OutputConfig, ParserConfig
from durctl.domain.parser import ParseOptions


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one TOML file; empty when *toml_path* is None."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None and toml_path.is_file():
            data = read_toml(toml_path)
            validate_sections(data, source=toml_path)
            self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# settings_customise_sources is a classmethod, so the file chosen by
# from_cli() reaches it through thread-local state.
_pending = threading.local()


class DurSettings(BaseSettings):
    """Frozen runtime settings shared by the CLI and services.

    Attributes:
        config_path: The TOML file that was loaded, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DURCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_source = TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None))
        return (init_settings, env_settings, toml_source)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DurSettings:
        """Resolve the config file and build settings with *cli_flags* on top.

        An explicit *config_path* that does not exist is ignored; otherwise
        discovery walks up from *start*.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(start)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None

    def parse_options(self, *, lenient: bool = False) -> ParseOptions:
        """Parser policy from ``[parser]``; *lenient* turns on ``allow_trailing``."""
        return ParseOptions(
            allow_trailing=self.parser.allow_trailing or lenient,
            allow_empty=self.parser.allow_empty,
        )
