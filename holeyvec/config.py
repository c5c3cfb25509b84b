"""Environment-driven settings for the package's logging."""
from __future__ import annotations

import logging
import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LOG_LEVEL_ENV = "HOLEYVEC_LOG_LEVEL"
LOG_FORMAT_ENV = "HOLEYVEC_LOG_FORMAT"


class Settings(BaseModel):
    log_level: str = Field(default="WARNING")
    log_format: Literal["json", "plain"] = "json"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``HOLEYVEC_*`` environment variables."""
        data = {}
        if os.getenv(LOG_LEVEL_ENV):
            data["log_level"] = os.environ[LOG_LEVEL_ENV]
        if os.getenv(LOG_FORMAT_ENV):
            data["log_format"] = os.environ[LOG_FORMAT_ENV].strip().lower()
        return cls(**data)


__all__ = ["Settings", "LOG_LEVEL_ENV", "LOG_FORMAT_ENV"]
