"""
Process configuration, read once at startup from the environment and an
optional `.env` file. Process environment wins over `.env`.
"""

from __future__ import annotations

import os

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = ""
    server_host: str = "0.0.0.0"
    server_port: int = 3000
    log_level: str = "INFO"
    cors_origins: str = "*"
    cache_table: str = "cache"
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10
    db_command_timeout: int = 30

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    @field_validator("database_url", "server_host", "cache_table", mode="before")
    @classmethod
    def _strip(cls, value, info: ValidationInfo):
        value = str(value).strip()
        return value or cls.model_fields[info.field_name].default

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper(cls, value):
        return str(value).strip().upper() or "INFO"

    @field_validator("server_port", mode="before")
    @classmethod
    def _port(cls, value):
        # Accept both "3000" and listen-address style ":3000".
        raw = str(value).strip().lstrip(":")
        try:
            return int(raw)
        except ValueError:
            return 3000

    @field_validator("db_pool_min_size", "db_pool_max_size", "db_command_timeout", mode="before")
    @classmethod
    def _int_or_default(cls, value, info: ValidationInfo):
        try:
            return int(str(value).strip())
        except ValueError:
            return cls.model_fields[info.field_name].default


def cors_origins(env_file: str | None = ".env") -> list[str]:
    raw = Settings(_env_file=env_file).cors_origins
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def load_settings(env_file: str | None = ".env") -> Settings:
    settings = Settings(_env_file=env_file)
    # $VAR / ${VAR} inside the DSN are expanded here and nowhere else.
    database_url = os.path.expandvars(settings.database_url)
    if not database_url:
        raise RuntimeError("DATABASE_URL is not set.")
    return settings.model_copy(update={"database_url": database_url})
