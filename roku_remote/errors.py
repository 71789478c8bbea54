"""Exceptions raised by roku-remote."""

from __future__ import annotations

from typing import Optional


class RokuError(RuntimeError):
    """Base class for every error surfaced by the client."""


class TransportFailure(RokuError):
    """Raised on network errors or a non-2xx response from the device."""

    def __init__(
        self, message: str, *, url: str, status: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status


class AmbiguousActiveApp(RokuError):
    """Raised when the device reports more than one active application."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Device reported {count} active apps; expected at most one"
        )
        self.count = count


class MalformedResponse(RokuError):
    """Raised when a query response body cannot be parsed."""


class MalformedInfoResponse(MalformedResponse):
    """Raised when the device-info response has no fields."""


class InvalidInput(RokuError, ValueError):
    """Raised before any request is made for input that cannot be encoded."""


class IconFetchFailed(RokuError):
    """Raised when an app icon cannot be downloaded or stored."""

    def __init__(self, message: str, *, app_id: str) -> None:
        super().__init__(message)
        self.app_id = app_id


class ChainAlreadySent(RokuError):
    """Raised when a command chain is modified or sent after draining began."""
