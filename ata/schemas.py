"""Pydantic schema for the ata.toml configuration file."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Config(BaseModel):
    """Immutable configuration, loaded once at startup."""

    model_config = ConfigDict(frozen=True, strict=True)

    # repr=False keeps the key out of logs and tracebacks
    api_key: str = Field(min_length=1, repr=False, description="OpenAI API key, sent as bearer token")
    model: str = Field(min_length=1, description="Model ID, also used as the prompt label")
    max_tokens: int = Field(gt=0, description="Max tokens to generate per turn")
    temperature: int = Field(ge=0, le=2, description="Sampling temperature (0–2)")
