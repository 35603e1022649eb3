"""Logging configuration for services using reqlog.

Access-log records carry the sink's severity label as ``severity``. JSON
output keeps it as its own key; text output shows it after the level, with
``-`` for records that have none.
"""

from __future__ import annotations

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

from reqlog.config import settings

TEXT_FORMAT = "%(asctime)s [%(levelname)s] [%(severity)s] %(name)s: %(message)s"


def setup_logging() -> None:
    """Install one root handler and set the access logger's level.

    The access logger keeps propagating to the root handler; its own level
    comes from REQLOG_ACCESS_LOG_LEVEL so access lines survive a quieter
    REQLOG_LOG_LEVEL.
    """
    root_logger = logging.getLogger()
    # Reload-safe
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter(settings.log_format))
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    access_logger = logging.getLogger(settings.access_logger_name)
    access_logger.setLevel(getattr(logging, settings.access_log_level, logging.INFO))

    # uvicorn's own access log duplicates ours
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    return logging.Formatter(
        fmt=TEXT_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        defaults={"severity": "-"},
    )
