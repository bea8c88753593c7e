"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, selkit.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CodecConfig(BaseModel):
    """[codec] section."""

    model_config = {"frozen": True}

    indent: int | None = Field(default=None, ge=0)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True

