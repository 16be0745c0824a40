"""Custom exceptions raised by the simple HTTP helper."""

from __future__ import annotations

from typing import Any


class SimpleHttpError(Exception):
    """Base error for all helper failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class InvalidURIError(SimpleHttpError):
    """Raised when a request URI cannot be assembled or escaped."""


class UnsupportedEncodingError(SimpleHttpError):
    """Raised when a body encoding other than JSON is requested."""


class TransportError(SimpleHttpError):
    """Raised when the server cannot be reached."""


class MalformedResponseError(SimpleHttpError):
    """Raised when a successful response body is not valid JSON."""


__all__ = [
    "InvalidURIError",
    "MalformedResponseError",
    "SimpleHttpError",
    "TransportError",
    "UnsupportedEncodingError",
]
