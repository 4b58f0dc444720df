"""Application configuration and environment management."""
from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


load_dotenv()


class Settings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="Timezone Parameter", description="Human readable app name")
    environment: str = Field(default="development", description="Runtime environment name")
    log_level: str = Field(default="INFO", description="Root level for the package logger")

    offset_reference: Optional[datetime] = Field(
        default=None,
        description="Instant used to read zone rules from the tz database; unset means now",
    )

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    @field_validator("offset_reference")
    @classmethod
    def _assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


_ENV_MAPPING = {
    "APP_NAME": "app_name",
    "ENVIRONMENT": "environment",
    "LOG_LEVEL": "log_level",
    "OFFSET_REFERENCE": "offset_reference",
}


def _load_settings() -> Settings:
    data: dict[str, object] = {}
    for env_name, field_name in _ENV_MAPPING.items():
        if env_name not in os.environ:
            continue
        value = os.environ[env_name].strip()
        if field_name == "offset_reference" and not value:
            continue
        data[field_name] = value
    return Settings(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return _load_settings()
