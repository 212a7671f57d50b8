"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nricctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- nricctl.toml sections ---


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    normalize: bool = True
    ignore_separators: bool = True


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    show_expected: bool = True


class NricConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    input: InputConfig = Field(default_factory=InputConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
