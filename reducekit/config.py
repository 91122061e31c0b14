"""
Configuration settings for reducekit.

Uses Pydantic Settings to load environment variables for logging and matcher
defaults. Every field can be overridden through the environment or a `.env`
file in the working directory.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FoldingMode = Literal["casefold", "lower"]


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Matcher defaults
    case_folding: FoldingMode = Field("casefold", alias="CASE_FOLDING")
    record_name_field: str = Field("name", alias="RECORD_NAME_FIELD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["FoldingMode", "Settings", "get_settings"]
