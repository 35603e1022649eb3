"""Access logging for ASGI applications."""

from reqlog.context import RequestContext, ResponseState
from reqlog.formatting import default_format, field_list_format
from reqlog.middleware.request_logging import RequestLoggingMiddleware, create_middleware
from reqlog.plugins import DEFAULT_PLUGINS
from reqlog.severity import default_severity
from reqlog.sink import LoggerSink, LogSink

__all__ = [
    "DEFAULT_PLUGINS",
    "LogSink",
    "LoggerSink",
    "RequestContext",
    "RequestLoggingMiddleware",
    "ResponseState",
    "create_middleware",
    "default_format",
    "default_severity",
    "field_list_format",
]
