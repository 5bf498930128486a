"""
Configuration model for tokenkit.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class TokenConfig(BaseModel):
    """Host-supplied settings for token resolution."""

    model_config = ConfigDict(extra="forbid")

    platform: str = "ios"
    overlay_dir: Path | None = None
    log_level: str = "INFO"

    @field_validator("platform")
    @classmethod
    def _normalize_platform(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: '{value}'")
        return level
