"""Shared pytest fixtures for fastapi-request-guard tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest
from starlette.requests import Request


@pytest.fixture
def make_request() -> Any:
    """Factory for creating mock Starlette Request objects."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
        client: tuple[str, int] | None = ("127.0.0.1", 50000),
        session: dict[str, Any] | None = None,
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
            "client": client,
        }
        if session is not None:
            scope["session"] = session
        return Request(scope)

    return _make


@pytest.fixture
def anonymous_session() -> AsyncMock:
    """Mock session store with no logged-in user."""
    mock = AsyncMock()
    mock.exists.return_value = False
    return mock


@pytest.fixture
def user_session() -> AsyncMock:
    """Mock session store with a logged-in user."""
    mock = AsyncMock()
    mock.exists.return_value = True
    return mock
