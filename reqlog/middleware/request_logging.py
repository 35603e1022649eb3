"""Access-log middleware.

Wraps the ASGI ``send`` callable of each HTTP request. When the final
``http.response.body`` message goes out, the original ``send`` runs first,
then the field plugins, severity classifier and formatter run and one line
is handed to the sink. Responses that never finish produce no line.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Mapping

from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from reqlog.config import settings
from reqlog.context import RequestContext, ResponseState
from reqlog.formatting import LineFormatter, resolve_formatter
from reqlog.plugins import FieldPlugin, compute_fields, merge_plugins
from reqlog.severity import SeverityClassifier, default_severity
from reqlog.sink import LoggerSink, LogSink


@dataclass(frozen=True)
class AccessLogPipeline:
    """Resolved configuration shared by every request of one middleware."""

    sink: LogSink
    plugins: Mapping[str, FieldPlugin]
    formatter: LineFormatter
    severity: SeverityClassifier
    clock: Callable[[], int] = time.perf_counter_ns

    def emit(self, context: RequestContext) -> None:
        fields = compute_fields(self.plugins, context)
        label = self.severity(context)
        message = self.formatter(fields)
        self.sink.log(label, message)


def build_pipeline(
    sink: LogSink | None = None,
    format=None,
    plugins: Mapping[str, FieldPlugin] | None = None,
    severity: SeverityClassifier | None = None,
    clock: Callable[[], int] = time.perf_counter_ns,
) -> AccessLogPipeline:
    if sink is None:
        sink = LoggerSink(logging.getLogger(settings.access_logger_name))
    return AccessLogPipeline(
        sink=sink,
        plugins=merge_plugins(plugins),
        formatter=resolve_formatter(format),
        severity=severity or default_severity,
        clock=clock,
    )


class RequestLoggingMiddleware:
    """ASGI middleware that emits one access-log line per finished response.

    Usable directly with ``app.add_middleware(RequestLoggingMiddleware, ...)``;
    configuration is resolved once, here, not per request.
    """

    def __init__(
        self,
        app: ASGIApp,
        sink: LogSink | None = None,
        format=None,
        plugins: Mapping[str, FieldPlugin] | None = None,
        severity: SeverityClassifier | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
        pipeline: AccessLogPipeline | None = None,
    ) -> None:
        self.app = app
        self.pipeline = pipeline or build_pipeline(
            sink, format=format, plugins=plugins, severity=severity, clock=clock
        )

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        pipeline = self.pipeline
        start_time = pipeline.clock()
        client = scope.get("client")
        peer = client[0] if client else None
        response = ResponseState()
        emitted = False

        async def send_with_logging(message: Message) -> None:
            nonlocal emitted
            if message["type"] == "http.response.start":
                response.status_code = message["status"]
                response.headers = list(message.get("headers", []))

            await send(message)

            if (
                message["type"] == "http.response.body"
                and not message.get("more_body", False)
                and not emitted
            ):
                emitted = True
                context = RequestContext(
                    request=Request(scope, receive),
                    response=response,
                    start_time=start_time,
                    peer=peer,
                    clock=pipeline.clock,
                )
                pipeline.emit(context)

        await self.app(scope, receive, send_with_logging)


def create_middleware(
    sink: LogSink,
    *,
    format=None,
    plugins: Mapping[str, FieldPlugin] | None = None,
    severity: SeverityClassifier | None = None,
) -> Callable[[ASGIApp], RequestLoggingMiddleware]:
    """Resolve access-log configuration once and return a middleware factory.

    ``format`` is either a list of field names (rendered in that order) or a
    function of the full field mapping. ``plugins`` are merged over the
    built-ins. The returned callable wraps an ASGI app and can be passed to
    ``app.add_middleware``.
    """
    pipeline = build_pipeline(sink, format=format, plugins=plugins, severity=severity)

    def middleware(app: ASGIApp) -> RequestLoggingMiddleware:
        return RequestLoggingMiddleware(app, pipeline=pipeline)

    return middleware
