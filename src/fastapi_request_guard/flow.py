"""Flow class — ordered container and execution engine for FlowComponents."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from starlette.requests import Request

from fastapi_request_guard.component import FlowComponent
from fastapi_request_guard.context import RequestContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedFlow:
    """Immutable, pre-computed execution plan."""

    components: tuple[FlowComponent, ...]

    async def run(self, request: Request, ctx: RequestContext) -> RequestContext:
        """Thread ``ctx`` through every component and return the final context."""
        for component in self.components:
            logger.debug(
                "Running %s (%s) for %s %s",
                type(component).__name__,
                component.category.value,
                request.method,
                request.url.path,
            )
            ctx = await component.resolve(request, ctx)
        return ctx


class Flow:
    """Ordered container of FlowComponent instances."""

    def __init__(self, *components: FlowComponent | Flow) -> None:
        self._items: list[FlowComponent | Flow] = list(components)
        self._resolved: ResolvedFlow | None = None

    def add(self, *components: FlowComponent | Flow) -> Flow:
        self._items.extend(components)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedFlow:
        if self._resolved is not None:
            return self._resolved

        flat: list[FlowComponent] = []
        self._flatten(self._items, flat)

        sorted_components = sorted(flat, key=lambda c: c.category.order)

        self._resolved = ResolvedFlow(components=tuple(sorted_components))
        return self._resolved

    @staticmethod
    def _flatten(items: list[FlowComponent | Flow], out: list[FlowComponent]) -> None:
        for item in items:
            if isinstance(item, Flow):
                Flow._flatten(item._items, out)
            else:
                out.append(item)
