from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FIBTEMP_",
        extra="ignore",
    )

    output_format: Literal["rich", "json", "quiet"] | None = None
    value_bits: int = Field(default=32, ge=2)
    precision: int | None = Field(default=None, ge=0)
