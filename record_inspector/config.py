"""
Configuration settings for the Record Inspector.

Uses Pydantic Settings to load environment variables for the store location,
table names, logging, and inspection defaults.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# The store file lives next to the installed package unless overridden.
DEFAULT_DB_PATH = Path(__file__).resolve().parent / "users.db"


class Settings(BaseSettings):
    # Store
    db_path: Path = Field(DEFAULT_DB_PATH, alias="INSPECTOR_DB_PATH")
    articles_table: str = Field("user_audiobooks", alias="INSPECTOR_ARTICLES_TABLE")
    users_table: str = Field("users", alias="INSPECTOR_USERS_TABLE")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Inspection defaults
    inspect_limit: int = Field(5, ge=1, alias="INSPECTOR_LIMIT")

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


__all__ = ["DEFAULT_DB_PATH", "Settings", "get_settings"]
