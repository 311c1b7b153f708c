"""
Approval Templates - Configuration Module

Settings for the outer adapters (logging, HTTP router). The resolution
core reads no configuration.
"""
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    CONSOLE = "console"


class LogConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(default="INFO")
    format: LogFormat = Field(default=LogFormat.CONSOLE)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ApiConfig(BaseSettings):
    """HTTP router configuration."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATES_API_",
        extra="ignore"
    )

    prefix: str = Field(default="/templates")
    title: str = Field(default="Approval Templates")


class AppConfig(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log: LogConfig = Field(default_factory=LogConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(log=LogConfig(), api=ApiConfig())


def load_config() -> AppConfig:
    """Load application configuration."""
    return AppConfig.from_env()


_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config
