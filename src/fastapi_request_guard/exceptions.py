"""FlowException hierarchy for controlled flow aborts."""

from __future__ import annotations


class FlowException(Exception):
    """Base for all flow exceptions."""


class FlowAbort(FlowException):
    """Controlled abort with HTTP status code and detail."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = 400,
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.detail = detail
        self.headers = headers


class LoginRequired(FlowAbort):
    """No authenticated session; redirect the client (307)."""

    def __init__(self, detail: str = "Login required", *, location: str = "/") -> None:
        super().__init__(detail, status_code=307, headers={"Location": location})
        self.location = location


class MissingContextValue(FlowException, LookupError):
    """A typed context lookup found no value for its key."""

    def __init__(self, key_name: str) -> None:
        super().__init__(f"No value for context key {key_name!r}")
        self.key_name = key_name
