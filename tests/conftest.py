"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest
from starlette.requests import Request

from reqlog.context import RequestContext, ResponseState


class RecordingSink:
    """Sink that keeps every (severity, message) pair it receives."""

    def __init__(self, events: list | None = None):
        self.calls: list[tuple[str, str]] = []
        self.events = events if events is not None else []

    def log(self, severity: str, message: str) -> None:
        self.calls.append((severity, message))
        self.events.append("sink")


class FakeClock:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 5_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance_ms(self, ms: int) -> None:
        self.now += ms * 1_000_000


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def clock():
    return FakeClock()


def make_scope(
    method: str = "GET",
    path: str = "/",
    query: bytes = b"",
    headers: dict[str, str] | list[tuple[str, str]] | None = None,
    client: tuple[str, int] | None = ("10.0.0.7", 51234),
    raw_path: bytes | None = None,
) -> dict:
    if isinstance(headers, dict):
        headers = list(headers.items())
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "path": path,
        "raw_path": raw_path if raw_path is not None else path.encode(),
        "query_string": query,
        "root_path": "",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in headers or []
        ],
        "client": client,
        "server": ("testserver", 80),
    }


@pytest.fixture
def make_context(clock):
    """Build a RequestContext the way the middleware does at completion."""

    def _make(status_code: int = 200, peer: str | None = None, **scope_kwargs) -> RequestContext:
        scope = make_scope(**scope_kwargs)
        return RequestContext(
            request=Request(scope),
            response=ResponseState(status_code=status_code),
            start_time=clock(),
            peer=peer,
            clock=clock,
        )

    return _make
