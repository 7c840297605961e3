"""
Configuration management for rpn-calc.

Handles loading configuration from environment variables and YAML files,
and sets up structured logging.
"""

import logging
import sys
from pathlib import Path
from typing import Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="RPN_CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application settings
    app_name: str = "rpn-calc"
    debug: bool = False
    log_level: LogLevel = "WARNING"

    # Interactive prompt
    prompt: str = "Input expression"
    prompt_marker: str = ">> "
    input_error_message: str = "Input error..."

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level


# Global settings instance
settings = Settings()


def load_yaml_config(path: Path) -> dict:
    """Load configuration from a YAML file."""
    import yaml

    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_settings(path: Path | None = None) -> Settings:
    """Build settings from the environment, overridden by an optional YAML file."""
    if path is None:
        return settings
    return Settings(**load_yaml_config(path))


def configure_logging(level: str = "WARNING") -> None:
    """Route structlog output to stderr, dropping events below ``level``."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper())),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
