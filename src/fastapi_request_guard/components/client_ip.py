"""Client IP components — resolve the caller's address into the context."""

from __future__ import annotations

import ipaddress
from collections.abc import Mapping

from starlette.datastructures import Headers
from starlette.requests import Request

from fastapi_request_guard.component import ComponentCategory, FlowComponent
from fastapi_request_guard.context import ContextKey, RequestContext
from fastapi_request_guard.netaddr import remote_address, split_host_port

CLIENT_IP: ContextKey[str] = ContextKey("client_ip")

FORWARDED_FOR = "X-Forwarded-For"


def _parse_ip(remote_addr: str) -> str:
    host, _ = split_host_port(remote_addr)
    ipaddress.ip_address(host)
    return host


def resolve_client_ip(
    remote_addr: str,
    headers: Mapping[str, str],
    *,
    header: str = FORWARDED_FOR,
) -> str:
    """Resolve the client IP from the peer address and forwarding header.

    A peer address that is not ``IP:port`` falls back to a raw split of the
    address, or ``"unknown"`` when that yields no host. A non-empty forwarding
    header overrides the result verbatim. The header name is matched
    case-insensitively, and only its first value is read.
    """
    try:
        ip = _parse_ip(remote_addr)
    except ValueError:
        try:
            ip, _ = split_host_port(remote_addr)
        except ValueError:
            ip = ""
        if not ip:
            ip = "unknown"

    if not isinstance(headers, Headers):
        headers = Headers(headers=headers)
    forwarded = headers.get(header)
    if forwarded:
        ip = forwarded

    # Degenerate fallback; unreachable with the fallbacks above.
    if not ip:
        ip = "forward"
    return ip


def client_ip_from_context(ctx: RequestContext) -> str:
    """Return the client IP stored by ``ClientIP``.

    Raises ``MissingContextValue`` if the context never passed through it.
    """
    return ctx.value(CLIENT_IP)


class ClientIP(FlowComponent):
    """Stores the resolved client IP in a derived context."""

    category = ComponentCategory.CONTEXT

    def __init__(self, *, header: str = FORWARDED_FOR) -> None:
        self._header = header

    async def resolve(self, request: Request, ctx: RequestContext) -> RequestContext:
        ip = resolve_client_ip(
            remote_address(request), request.headers, header=self._header
        )
        return ctx.with_value(CLIENT_IP, ip)
