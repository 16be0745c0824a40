"""Uniform view over a raw transport response."""

from __future__ import annotations

from typing import Any

from .parser import decode_body, parse_json_body
from .transport.base import TransportResponse

SUCCESS_STATUS_CODES = frozenset({200, 201})


class SimpleHttpResult:
    """Success, error message and parsed content of one response.

    Only 200 and 201 count as success. A failed status is not raised; callers
    check ``is_success()`` and read ``error_message()``.
    """

    def __init__(self, response: TransportResponse) -> None:
        self._response = response

    @property
    def response(self) -> TransportResponse:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status

    @property
    def text(self) -> str:
        return decode_body(self._response.body)

    def is_success(self) -> bool:
        return self._response.status in SUCCESS_STATUS_CODES

    def error_message(self) -> str:
        return "" if self.is_success() else self.text

    def content(self) -> Any:
        if not self.is_success():
            return None
        return parse_json_body(self.text)

    def __str__(self) -> str:
        return f"<SimpleHttpResult status={self.status_code} bytes={len(self._response.body or b'')}>"

    __repr__ = __str__


__all__ = ["SUCCESS_STATUS_CODES", "SimpleHttpResult"]
