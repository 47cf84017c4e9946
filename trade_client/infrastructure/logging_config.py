# trade_client/infrastructure/logging_config.py
"""
Logging setup for applications embedding the trade client

The package never configures logging on its own. Applications that want
the bundled console output call configure_logging() once at startup.
"""
import logging.config
from typing import Any, Dict, Optional

from trade_client.infrastructure.config import get_config


def build_logging_config(level: str = "INFO") -> Dict[str, Any]:
    """dictConfig schema routing trade_client loggers to the console"""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
                "style": "{",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "level": level,
                "class": "logging.StreamHandler",
                "formatter": "simple",
            },
        },
        "loggers": {
            "trade_client": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the schema, defaulting to the level of the active environment"""
    level = level or get_config().get("logging", {}).get("level", "INFO")
    logging.config.dictConfig(build_logging_config(level.upper()))
