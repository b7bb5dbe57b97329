"""FlowComponent abstract base class and ComponentCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from starlette.requests import Request

from fastapi_request_guard.context import RequestContext


class ComponentCategory(Enum):
    """Processing component categories, defining strict execution order."""

    CONTEXT = "context"
    AUTHENTICATION = "authentication"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        _ORDER = {
            "context": 1,
            "authentication": 2,
            "custom": 3,
        }
        return _ORDER[self.value]


class FlowComponent(ABC):
    """Base abstraction for all processing units in a flow.

    ``resolve`` returns the context to hand to the next component: either
    ``ctx`` itself or a context derived from it. Raising ``FlowAbort``
    short-circuits the request.
    """

    category: ClassVar[ComponentCategory]

    @abstractmethod
    async def resolve(self, request: Request, ctx: RequestContext) -> RequestContext: ...
