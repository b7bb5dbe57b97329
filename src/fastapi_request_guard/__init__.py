"""FastAPI Request Guard - client IP context and session gating for ASGI apps."""

from fastapi_request_guard.component import ComponentCategory, FlowComponent
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
from fastapi_request_guard.context import (
    ContextKey,
    RequestContext,
    get_request_context,
    scope_with_context,
)
from fastapi_request_guard.dependency import client_ip, flow_dependency, request_context
from fastapi_request_guard.exceptions import (
    FlowAbort,
    FlowException,
    LoginRequired,
    MissingContextValue,
)
from fastapi_request_guard.flow import Flow, ResolvedFlow
from fastapi_request_guard.middleware import (
    ClientIPMiddleware,
    FlowMiddleware,
    SessionAuthMiddleware,
    abort_response,
)
from fastapi_request_guard.netaddr import split_host_port

__all__ = [
    "CLIENT_IP",
    "ClientIP",
    "ClientIPMiddleware",
    "ComponentCategory",
    "ContextKey",
    "Flow",
    "FlowAbort",
    "FlowComponent",
    "FlowException",
    "FlowMiddleware",
    "LoginRequired",
    "MissingContextValue",
    "RequestContext",
    "ResolvedFlow",
    "SessionAuthMiddleware",
    "SessionRequired",
    "SessionStore",
    "StarletteSessionStore",
    "abort_response",
    "client_ip",
    "client_ip_from_context",
    "flow_dependency",
    "get_request_context",
    "request_context",
    "resolve_client_ip",
    "scope_with_context",
    "split_host_port",
]
