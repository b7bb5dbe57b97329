"""ASGI middleware that runs a Flow in front of the wrapped application."""

from __future__ import annotations

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse, RedirectResponse, Response
from starlette.types import ASGIApp, Receive, Scope, Send

from fastapi_request_guard.components.client_ip import FORWARDED_FOR, ClientIP
from fastapi_request_guard.components.session import SessionRequired, SessionStore
from fastapi_request_guard.context import get_request_context, scope_with_context
from fastapi_request_guard.exceptions import FlowAbort, LoginRequired
from fastapi_request_guard.flow import Flow

logger = logging.getLogger(__name__)


def abort_response(exc: FlowAbort) -> Response:
    """Build the HTTP response sent when a flow aborts."""
    if isinstance(exc, LoginRequired):
        return RedirectResponse(exc.location, status_code=exc.status_code)
    return JSONResponse(
        {"detail": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


class FlowMiddleware:
    """Runs ``flow`` for each HTTP request, then calls the next app.

    The next app receives a copy of the scope carrying the derived
    ``RequestContext``. Non-HTTP scopes pass through untouched.
    """

    def __init__(self, app: ASGIApp, flow: Flow) -> None:
        self.app = app
        self._resolved = flow.resolve()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        try:
            ctx = await self._resolved.run(request, get_request_context(request))
        except FlowAbort as exc:
            logger.debug(
                "Flow aborted %s %s with %d: %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.detail,
            )
            response = abort_response(exc)
            await response(scope, receive, send)
            return

        await self.app(scope_with_context(scope, ctx), receive, send)


class ClientIPMiddleware(FlowMiddleware):
    """Stores the client IP in the request context."""

    def __init__(self, app: ASGIApp, *, header: str = FORWARDED_FOR) -> None:
        super().__init__(app, Flow(ClientIP(header=header)))


class SessionAuthMiddleware(FlowMiddleware):
    """Redirects requests without an authenticated session."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        session: SessionStore,
        key: str = "user",
        flash_key: str = "error",
        message: str = "Log in first",
        redirect_to: str = "/",
    ) -> None:
        gate = SessionRequired(
            session,
            key=key,
            flash_key=flash_key,
            message=message,
            redirect_to=redirect_to,
        )
        super().__init__(app, Flow(gate))
