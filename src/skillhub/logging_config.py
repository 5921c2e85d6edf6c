"""Logging configuration: console output plus an optional log file."""

import logging
import logging.config
from typing import Any, Dict

from skillhub.config import Settings

LOGGER_NAME = "skillhub"


def get_logging_config(settings: Settings) -> Dict[str, Any]:
    """Build a ``dictConfig`` mapping from application settings."""
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stdout",
        }
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": settings.log_file,
            "encoding": "utf-8",
            "delay": True,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": handlers,
        "loggers": {
            LOGGER_NAME: {
                "handlers": list(handlers),
                "level": settings.log_level,
                "propagate": False,
            },
            "uvicorn": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }


def configure_logging(settings: Settings) -> None:
    """Apply the logging configuration for ``settings``."""
    logging.config.dictConfig(get_logging_config(settings))
