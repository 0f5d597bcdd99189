"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pktctl.toml only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

MAX_DEPTH_LIMIT = 300


class ParserConfig(BaseModel):
    """[parser] section."""

    model_config = {"frozen": True}

    max_depth: int = Field(default=256, ge=1, le=MAX_DEPTH_LIMIT)
    # None disables the range check.
    max_value: int | None = Field(default=255, ge=0)
    overflow: Literal["error", "wrap"] = "error"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
