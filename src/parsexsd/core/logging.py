#!/usr/bin/env python3

import logging
import logging.config

from pythonjsonlogger.json import JsonFormatter

from .env_utils import getenv_clean

DEFAULT_LOG_LEVEL = "INFO"


def setup_logging(level: str = None):
    """Setup JSON logging configuration.

    Logs go to stderr so that the console preview on stdout stays readable.
    The level comes from the argument, then PARSEXSD_LOG_LEVEL, then INFO.
    """
    if level is None:
        level = getenv_clean("PARSEXSD_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    level = level.upper()

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": "ext://sys.stderr"
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
                "propagate": False
            },
            "parsexsd": {
                "handlers": ["console"],
                "level": level,
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
