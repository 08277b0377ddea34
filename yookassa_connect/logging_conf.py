"""Logging configuration for YooKassa Connect."""
import logging
from logging.config import dictConfig
from typing import Optional

from .settings import settings


def build_logging_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            }
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Configure application-wide logging (LOG_LEVEL from settings by default)."""

    dictConfig(build_logging_config((level or settings.LOG_LEVEL).upper()))
    logging.getLogger(__name__).debug("Logging configured")
