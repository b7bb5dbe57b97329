"""flow_dependency() — factory producing FastAPI-compatible dependency callables."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi import HTTPException
from starlette.requests import Request

from fastapi_request_guard.components.client_ip import client_ip_from_context
from fastapi_request_guard.context import RequestContext, get_request_context
from fastapi_request_guard.exceptions import FlowAbort
from fastapi_request_guard.flow import Flow


def flow_dependency(flow: Flow) -> Callable[..., Awaitable[RequestContext]]:
    """Return a FastAPI-compatible dependency that executes the flow.

    The flow starts from the context propagated by any ``FlowMiddleware``
    in front of the route. Aborts become ``HTTPException`` with the abort's
    status code and headers, so a ``LoginRequired`` answers 307 with
    ``Location`` set.
    """
    resolved = flow.resolve()

    async def dependency(request: Request) -> RequestContext:
        try:
            return await resolved.run(request, get_request_context(request))
        except FlowAbort as exc:
            raise HTTPException(
                status_code=exc.status_code, detail=exc.detail, headers=exc.headers
            ) from exc

    return dependency


def request_context(request: Request) -> RequestContext:
    """Dependency returning the context propagated by middleware."""
    return get_request_context(request)


def client_ip(request: Request) -> str:
    """Dependency returning the client IP stored by ``ClientIPMiddleware``."""
    return client_ip_from_context(get_request_context(request))
