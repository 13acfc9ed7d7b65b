"""Configuration management for dbrowser."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import DEBOT_WC


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="DBROWSER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Network Configuration
    url: str = Field(default="net.ton.dev", description="Network endpoint the engine connects to")
    interface_workchain: int = Field(default=DEBOT_WC, description="Workchain reserved for browser interfaces")

    # Signing Configuration
    keys_path: Optional[Path] = Field(None, description="JSON key pair used to sign debot transactions")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_profile: Literal["default", "chat"] = Field(default="default", description="Log output profile")


def get_settings(**overrides: object) -> Settings:
    """Get application settings.

    Args:
        overrides: Explicit values taking precedence over environment and .env

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
