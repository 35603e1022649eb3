"""Log sinks: where finished access-log lines go."""

from __future__ import annotations

import logging
from typing import Protocol


class LogSink(Protocol):
    def log(self, severity: str, message: str) -> None: ...


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class LoggerSink:
    """Adapts a stdlib :class:`logging.Logger` to the sink interface.

    Labels without a matching level are logged at INFO. The label itself is
    always attached to the record as ``severity``.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def log(self, severity: str, message: str) -> None:
        level = _LEVELS.get(severity.lower(), logging.INFO)
        self.logger.log(level, message, extra={"severity": severity})
