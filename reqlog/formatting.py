"""Line formatters: turn computed fields into the message handed to the sink."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Sequence

LINE_PREFIX = "HTTP"

LineFormatter = Callable[[Mapping[str, "str | None"]], str]


def _render(fields: Mapping[str, str | None], names: Iterable[str]) -> str:
    segments = [
        f"{name}={fields[name]}"
        for name in names
        if fields.get(name) is not None
    ]
    return f"{LINE_PREFIX} " + ", ".join(segments)


def default_format(fields: Mapping[str, str | None]) -> str:
    """All non-null fields as ``key=value``, in mapping order.

    >>> default_format({"method": "GET", "url": "/", "userAgent": None})
    'HTTP method=GET, url=/'
    """
    return _render(fields, fields.keys())


def field_list_format(names: Sequence[str]) -> LineFormatter:
    """Build a formatter that renders only ``names``, in that order."""
    enabled = tuple(names)

    def format_fields(fields: Mapping[str, str | None]) -> str:
        return _render(fields, enabled)

    return format_fields


def resolve_formatter(format: Any = None) -> LineFormatter:
    """Resolve the ``format`` option once, at configuration time.

    ``None`` selects :func:`default_format`, a list or tuple of field names
    selects :func:`field_list_format`, and anything else is used as the
    formatter itself.
    """
    if format is None:
        return default_format
    if isinstance(format, (list, tuple)):
        return field_list_format(format)
    return format
