"""Environment-driven settings for the warehouse CLI.

Values are read from ``WAREHOUSE_*`` environment variables or a ``.env``
file in the working directory.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LOG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class WarehouseSettings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="WAREHOUSE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Log level")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, min_length=1)
    seed_sample_data: bool = Field(
        default=True, description="Populate the warehouse with sample stock"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level
