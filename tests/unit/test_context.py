"""Tests for RequestContext, ContextKey and scope propagation."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from fastapi_request_guard.context import (
    SCOPE_KEY,
    ContextKey,
    RequestContext,
    get_request_context,
    scope_with_context,
)
from fastapi_request_guard.exceptions import MissingContextValue

NAME: ContextKey[str] = ContextKey("name")


class TestRequestContext:
    def test_default_values_are_empty(self) -> None:
        ctx = RequestContext()
        assert dict(ctx.values) == {}

    def test_with_value_returns_new_context(self) -> None:
        ctx = RequestContext()
        derived = ctx.with_value(NAME, "alice")
        assert derived is not ctx
        assert derived.value(NAME) == "alice"

    def test_with_value_leaves_original_untouched(self) -> None:
        ctx = RequestContext()
        ctx.with_value(NAME, "alice")
        assert NAME not in ctx

    def test_with_value_overwrites_in_derived_only(self) -> None:
        first = RequestContext().with_value(NAME, "alice")
        second = first.with_value(NAME, "bob")
        assert first.value(NAME) == "alice"
        assert second.value(NAME) == "bob"

    def test_value_missing_raises(self) -> None:
        with pytest.raises(MissingContextValue) as exc_info:
            RequestContext().value(NAME)
        assert exc_info.value.key_name == "name"

    def test_missing_value_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            RequestContext().value(NAME)

    def test_get_returns_default(self) -> None:
        ctx = RequestContext()
        assert ctx.get(NAME) is None
        assert ctx.get(NAME, "fallback") == "fallback"

    def test_keys_with_same_name_do_not_collide(self) -> None:
        other: ContextKey[str] = ContextKey("name")
        ctx = RequestContext().with_value(NAME, "alice")
        assert other not in ctx
        assert ctx.get(other) is None

    def test_values_are_read_only(self) -> None:
        ctx = RequestContext().with_value(NAME, "alice")
        with pytest.raises(TypeError):
            ctx.values[NAME] = "bob"  # type: ignore[index]

    def test_is_frozen(self) -> None:
        ctx = RequestContext()
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.values = {}  # type: ignore[misc]


class TestScopePropagation:
    def test_root_context_when_none_attached(self, make_request: Any) -> None:
        ctx = get_request_context(make_request())
        assert isinstance(ctx, RequestContext)
        assert dict(ctx.values) == {}

    def test_reads_attached_context(self, make_request: Any) -> None:
        request = make_request()
        ctx = RequestContext().with_value(NAME, "alice")
        request.scope[SCOPE_KEY] = ctx
        assert get_request_context(request) is ctx

    def test_scope_with_context_copies_scope(self) -> None:
        scope: dict[str, Any] = {"type": "http", "path": "/"}
        ctx = RequestContext().with_value(NAME, "alice")
        derived = scope_with_context(scope, ctx)
        assert derived[SCOPE_KEY] is ctx
        assert derived["path"] == "/"
        assert SCOPE_KEY not in scope
