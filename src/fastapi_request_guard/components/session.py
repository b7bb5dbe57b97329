"""Session components — SessionRequired, SessionStore, StarletteSessionStore."""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from starlette.requests import HTTPConnection, Request

from fastapi_request_guard.component import ComponentCategory, FlowComponent
from fastapi_request_guard.context import RequestContext
from fastapi_request_guard.exceptions import LoginRequired

logger = logging.getLogger(__name__)


@runtime_checkable
class SessionStore(Protocol):
    """Request-correlated session storage consumed by the auth gate."""

    async def exists(self, conn: HTTPConnection, key: str) -> bool: ...
    async def put(self, conn: HTTPConnection, key: str, value: Any) -> None: ...
    async def pop(
        self, conn: HTTPConnection, key: str, default: Any = None
    ) -> Any: ...


class StarletteSessionStore:
    """Session store backed by Starlette's ``SessionMiddleware``.

    ``SessionMiddleware`` must wrap the app; otherwise every call raises the
    ``AssertionError`` Starlette uses for a missing session.
    """

    async def exists(self, conn: HTTPConnection, key: str) -> bool:
        return key in conn.session

    async def put(self, conn: HTTPConnection, key: str, value: Any) -> None:
        conn.session[key] = value

    async def pop(self, conn: HTTPConnection, key: str, default: Any = None) -> Any:
        return conn.session.pop(key, default)


class SessionRequired(FlowComponent):
    """Redirects requests whose session has no authenticated user."""

    category = ComponentCategory.AUTHENTICATION

    def __init__(
        self,
        session: SessionStore,
        *,
        key: str = "user",
        flash_key: str = "error",
        message: str = "Log in first",
        redirect_to: str = "/",
    ) -> None:
        self._session = session
        self._key = key
        self._flash_key = flash_key
        self._message = message
        self._redirect_to = redirect_to

    async def resolve(self, request: Request, ctx: RequestContext) -> RequestContext:
        if not await self._session.exists(request, self._key):
            await self._session.put(request, self._flash_key, self._message)
            logger.info(
                "No %r in session for %s, redirecting to %s",
                self._key,
                request.url.path,
                self._redirect_to,
            )
            raise LoginRequired(self._message, location=self._redirect_to)
        return ctx
