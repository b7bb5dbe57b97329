"""RequestContext — immutable per-request key/value carrier."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Generic, TypeVar, overload

from starlette.requests import HTTPConnection

from fastapi_request_guard.exceptions import MissingContextValue

T = TypeVar("T")
D = TypeVar("D")

SCOPE_KEY = "fastapi_request_guard.context"


class ContextKey(Generic[T]):
    """Private context key. Keys compare by identity, never by name."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return f"ContextKey({self.name!r})"


def _empty() -> Mapping[ContextKey[Any], Any]:
    return MappingProxyType({})


@dataclass(frozen=True)
class RequestContext:
    """Immutable per-request state; each stage derives a new context."""

    values: Mapping[ContextKey[Any], Any] = field(default_factory=_empty)

    def with_value(self, key: ContextKey[T], value: T) -> RequestContext:
        return replace(self, values=MappingProxyType({**self.values, key: value}))

    def value(self, key: ContextKey[T]) -> T:
        try:
            result: T = self.values[key]
        except KeyError:
            raise MissingContextValue(key.name) from None
        return result

    @overload
    def get(self, key: ContextKey[T]) -> T | None: ...

    @overload
    def get(self, key: ContextKey[T], default: D) -> T | D: ...

    def get(self, key: ContextKey[Any], default: Any = None) -> Any:
        return self.values.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self.values


def get_request_context(conn: HTTPConnection) -> RequestContext:
    """Return the context propagated on the connection's scope, or a root one."""
    ctx = conn.scope.get(SCOPE_KEY)
    if isinstance(ctx, RequestContext):
        return ctx
    return RequestContext()


def scope_with_context(
    scope: MutableMapping[str, Any], ctx: RequestContext
) -> MutableMapping[str, Any]:
    """Shallow-copy ``scope`` so it carries ``ctx``; the original is untouched."""
    derived = dict(scope)
    derived[SCOPE_KEY] = ctx
    return derived
