"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.

Connection parameters are read from the environment (or a ``.env`` file)
and are immutable once loaded.
"""

import logging
from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError


# libpq accepted values for sslmode
SSL_MODES = ("disable", "allow", "prefer", "require", "verify-ca", "verify-full")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Full URL wins over the individual parts below
    database_url: Optional[str] = Field(default=None)

    db_driver: str = Field(default="postgresql+psycopg2")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_name: str = Field(default="rental")
    db_user: str = Field(default="rental")
    db_password: SecretStr = Field(default=SecretStr(""))
    db_sslmode: str = Field(default="require")

    @field_validator("db_sslmode")
    @classmethod
    def validate_sslmode(cls, v: str) -> str:
        """Only allow sslmode values libpq understands."""
        v = v.lower()
        if v not in SSL_MODES:
            raise ValueError(f"db_sslmode must be one of {', '.join(SSL_MODES)}, got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @property
    def sqlalchemy_database_url(self) -> str:
        """
        Connection URL handed to SQLAlchemy.

        Built from the db_* parts unless database_url is set. The sslmode
        query parameter is only added for PostgreSQL drivers.
        """
        if self.database_url:
            return self.database_url

        query = {}
        if self.db_driver.startswith("postgresql"):
            query["sslmode"] = self.db_sslmode

        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password.get_secret_value() or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query=query,
        )
        return url.render_as_string(hide_password=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def print_settings(config: Optional[Settings] = None) -> None:
    """Print the effective settings with the password masked."""
    config = config or settings
    print("⚙️  Settings")
    for name, value in config.model_dump().items():
        if isinstance(value, SecretStr):
            value = "********" if value.get_secret_value() else ""
        print(f"  {name:<14} {value}")
    print(f"  {'url':<14} {_masked_url(config)}")


def _masked_url(config: Settings) -> str:
    try:
        return make_url(config.sqlalchemy_database_url).render_as_string(hide_password=True)
    except ArgumentError:
        return "<invalid url>"
