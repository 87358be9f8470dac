"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, newx.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GeneratorConfig(BaseModel):
    """[generator] section."""

    model_config = {"frozen": True}

    program: str = Field(default="cargo", min_length=1)
