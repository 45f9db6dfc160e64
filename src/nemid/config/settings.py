# src/nemid/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values are read from environment variables (or a .env file) and validated
on load.

Files that USE this module:
- nemid.app (default network and logging configuration for the CLI)

Files that this module USES:
- nemid.shared.validators (validation functions for settings)
- nemid.domain.network (NetworkType resolution)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

import logging  # Log level name resolution
from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from nemid.domain.network import NetworkType, network_type_from_string
from nemid.shared.validators import (
    validate_log_level,  # Validate logging level names
    validate_network_name,  # Validate supported network names
)


class Settings(BaseSettings):
    """Library and CLI settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Network ---
    network_type: str = Field(default="MIJIN_TEST", alias="NEMID_NETWORK_TYPE")

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="NEMID_LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="NEMID_LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="NEMID_LOG_DIR")
    log_console: bool = Field(default=True, alias="NEMID_LOG_CONSOLE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="NEMID_LOG_MAX_BYTES", ge=1024)  # 10MB
    log_backup_count: int = Field(default=5, alias="NEMID_LOG_BACKUP_COUNT", ge=0)

    @property
    def network(self) -> NetworkType:
        """Configured network as a NetworkType."""
        return network_type_from_string(self.network_type)

    @property
    def log_level_value(self) -> int:
        """Configured log level as a logging module constant."""
        return logging.getLevelName(self.log_level)

    @field_validator("network_type")
    @classmethod
    def validate_network_type(cls, v: str) -> str:
        """Validate network name."""
        if not validate_network_name(v):
            raise ValueError("NEMID_NETWORK_TYPE must be one of MIJIN, MIJIN_TEST, TEST_NET, MAIN_NET")
        return v.upper()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        if not validate_log_level(v):
            raise ValueError("NEMID_LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL")
        return v.upper()


# Global settings instance
settings = Settings()
