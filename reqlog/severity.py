"""Severity labels for access-log lines."""

from __future__ import annotations

from typing import Callable

from reqlog.context import RequestContext

INFO = "info"
WARN = "warn"
ERROR = "error"

SeverityClassifier = Callable[[RequestContext], str]


def default_severity(context: RequestContext) -> str:
    """Label by status band: below 400 info, below 500 warn, otherwise error."""
    status_code = context.response.status_code
    if status_code < 400:
        return INFO
    if status_code < 500:
        return WARN
    return ERROR
