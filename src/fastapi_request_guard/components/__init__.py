"""Built-in flow components."""

from fastapi_request_guard.components.client_ip import (
    CLIENT_IP,
    ClientIP,
    client_ip_from_context,
    resolve_client_ip,
)
from fastapi_request_guard.components.session import (
    SessionRequired,
    SessionStore,
    StarletteSessionStore,
)

__all__ = [
    "CLIENT_IP",
    "ClientIP",
    "SessionRequired",
    "SessionStore",
    "StarletteSessionStore",
    "client_ip_from_context",
    "resolve_client_ip",
]
