"""Field plugins.

A plugin is a function of a :class:`~reqlog.context.RequestContext` that
returns the text of one log field, or ``None`` to leave the field out.
The built-in set lives in :data:`DEFAULT_PLUGINS`; user plugins are merged
over it per middleware instance.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from user_agents import parse as parse_user_agent

from reqlog.context import RequestContext

FieldPlugin = Callable[[RequestContext], "str | None"]

FORWARDED_FOR_HEADER = "x-forwarded-for"


def remote_ip(context: RequestContext) -> str | None:
    """Forwarded-for header, else the framework's client IP, else the peer."""
    request = context.request
    # Repeated headers form one chain
    forwarded = ", ".join(request.headers.getlist(FORWARDED_FOR_HEADER))
    if forwarded:
        return forwarded
    if request.client and request.client.host:
        return request.client.host
    return context.peer or None


def status(context: RequestContext) -> str:
    return str(context.response.status_code)


def method(context: RequestContext) -> str:
    return context.request.method


def response_time(context: RequestContext) -> str:
    return f"{context.elapsed_ms()}ms"


def url(context: RequestContext) -> str:
    """Path plus query string, as received, percent-escapes intact."""
    scope = context.request.scope
    raw_path = scope.get("raw_path")
    if raw_path:
        # Some servers leave the query on raw_path
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = scope["path"]
    query = scope.get("query_string", b"")
    if query:
        return f"{path}?{query.decode('latin-1')}"
    return path


def user_agent(context: RequestContext) -> str:
    header = context.request.headers.get("user-agent", "")
    return str(parse_user_agent(header))


DEFAULT_PLUGINS: Mapping[str, FieldPlugin] = MappingProxyType(
    {
        "remoteIP": remote_ip,
        "status": status,
        "method": method,
        "responseTime": response_time,
        "url": url,
        "userAgent": user_agent,
    }
)


def merge_plugins(user_plugins: Mapping[str, FieldPlugin] | None = None) -> dict[str, FieldPlugin]:
    """Return a fresh registry: built-ins first, user plugins on top.

    A user plugin with a built-in's name replaces it in place; new names are
    appended in the order given.
    """
    merged = dict(DEFAULT_PLUGINS)
    if user_plugins:
        merged.update(user_plugins)
    return merged


def compute_fields(
    plugins: Mapping[str, FieldPlugin], context: RequestContext
) -> dict[str, str | None]:
    """Run every plugin once against ``context``, in registry order."""
    return {name: plugin(context) for name, plugin in plugins.items()}
