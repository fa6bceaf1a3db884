"""Opt-in logging setup for applications using the client.

The library itself only emits through module loggers under ``laravel_api``.
"""

from __future__ import annotations

import logging
import logging.config

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    """Route ``laravel_api`` logs to stderr at ``level``; httpx stays at WARNING."""
    log_level = level.upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": DEFAULT_LOG_FORMAT},
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            }
        },
        "root": {"handlers": ["default"], "level": log_level},
        "loggers": {
            "laravel_api": {"handlers": ["default"], "level": log_level, "propagate": False},
            # httpx logs every request at INFO
            "httpx": {"handlers": ["default"], "level": "WARNING", "propagate": False},
        },
    }

    logging.config.dictConfig(logging_config)
