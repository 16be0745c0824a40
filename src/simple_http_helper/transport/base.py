"""Common transport abstractions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Protocol, runtime_checkable

import httpx


@dataclass
class TransportResponse:
    status: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class Transport(Protocol):
    def send(self, request: httpx.Request) -> TransportResponse: ...

    def close(self) -> None: ...


__all__ = ["Transport", "TransportResponse"]
