"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, selectorkit.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- selectorkit.toml sections ---


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    color: bool = True
    width: int = Field(default=120, gt=0)
