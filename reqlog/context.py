"""Per-request state handed to field plugins and the severity classifier."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from starlette.requests import Request


@dataclass
class ResponseState:
    """What the interceptor has seen of the response so far.

    ``status_code`` stays at 500 until an ``http.response.start`` message
    passes through the wrapped ``send``.
    """

    status_code: int = 500
    headers: list[tuple[bytes, bytes]] = field(default_factory=list)

    def header(self, name: str) -> str | None:
        key = name.lower().encode("latin-1")
        for header_name, value in self.headers:
            if header_name.lower() == key:
                return value.decode("latin-1")
        return None


@dataclass(frozen=True)
class RequestContext:
    """Request, response and start time for one request.

    ``start_time`` and ``clock`` are in integer nanoseconds (monotonic).

    ``peer`` is the connection's client host as it was when the middleware
    attached, before any downstream middleware could rewrite the scope.
    """

    request: Request
    response: ResponseState
    start_time: int
    peer: str | None
    clock: Callable[[], int]

    def elapsed_ms(self) -> int:
        """Whole milliseconds since ``start_time``, truncated."""
        return (self.clock() - self.start_time) // 1_000_000
