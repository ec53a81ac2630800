"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field, field_validator

DEFAULT_USERS_URL = "https://jsonplaceholder.typicode.com/users"


class ApiConfig(BaseModel):
    """Remote users resource configuration model."""

    base_url: str = Field(
        default=DEFAULT_USERS_URL, description="URL of the users collection resource"
    )
    timeout_seconds: float = Field(
        default=10.0, description="HTTP timeout for a single exchange in seconds"
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("api.base_url must not be empty")
        return value.strip().rstrip("/")

    @computed_field
    @property
    def host(self) -> str:
        """Host portion of the base URL, used in log and status messages."""
        parts = self.base_url.split("://", 1)
        rest = parts[1] if len(parts) == 2 else parts[0]
        return rest.split("/", 1)[0]


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str | None = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    title: str = Field(
        default="User Directory", description="Title shown above the form and list"
    )


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    api: ApiConfig = Field(
        default_factory=ApiConfig, description="Remote users API configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
