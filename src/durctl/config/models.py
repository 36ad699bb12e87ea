"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, durctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- durctl.toml sections ---


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    allow_trailing: bool = False
    allow_empty: bool = False


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    show_zero_fields: bool = False


class DurConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    parser: ParserConfig = Field(default_factory=ParserConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
