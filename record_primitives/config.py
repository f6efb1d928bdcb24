# =============================================================================
# record_primitives/config.py - Library Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
#
# Usage:
#   from record_primitives.config import get_settings
#   print(get_settings().LOG_LEVEL)
#
# Every variable carries the RECORD_PRIMITIVES_ prefix
# (e.g. RECORD_PRIMITIVES_LOG_LEVEL) so a host application's own
# LOG_LEVEL or ENVIRONMENT never reaches these settings. Variables are read from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
#
# None of the primitives read settings; only setup_logging() and the
# `check` pipeline logger do, and only when they are called. Importing the
# package never loads or validates settings.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Every field has a default, so the library works without any
    environment at all.
    """

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------

    LOG_LEVEL: LogLevel = Field(
        default="INFO",
        description="Level for the record_primitives package logger",
    )

    LOG_FORMAT: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Format string used by setup_logging()",
    )

    # -------------------------------------------------------------------------
    # Debug pipeline logger (check)
    # -------------------------------------------------------------------------

    CHECK_LOG_LEVEL: LogLevel = Field(
        default="INFO",
        description="Level at which check() writes the values it is given",
    )

    ALLOW_BREAKPOINTS: bool = Field(
        default=True,
        description="Let check(value, pause=True) drop into the debugger (disable in CI)",
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Current environment",
    )

    model_config = SettingsConfigDict(
        env_prefix="RECORD_PRIMITIVES_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", "CHECK_LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def breakpoints_enabled(self) -> bool:
        """Breakpoints are never honoured in production."""
        return self.ALLOW_BREAKPOINTS and self.ENVIRONMENT != "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The .env file is parsed and validated on first use, once per process.
    """
    return Settings()
