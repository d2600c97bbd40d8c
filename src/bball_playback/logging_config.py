from __future__ import annotations

import copy
import logging.config
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


SERVICE_NAME = "bball-playback"


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that stamps every record with the service name."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("service", SERVICE_NAME)


LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - [%(levelname)s] - %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": "bball_playback.logging_config.ServiceJsonFormatter",
            "rename_fields": {
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger_name",
            },
            "datefmt": "%Y-%m-%dT%H:%M:%S%z",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "json",
        },
    },
    "loggers": {
        "bball_playback": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Apply the package logging configuration."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["loggers"]["bball_playback"]["level"] = level.upper()
    if not json_output:
        config["handlers"]["console"]["formatter"] = "standard"
    logging.config.dictConfig(config)
