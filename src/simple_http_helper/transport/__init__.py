"""Transport implementations exposed to users."""

from .base import Transport, TransportResponse
from .http import HttpxTransport

__all__ = [
    "HttpxTransport",
    "Transport",
    "TransportResponse",
]
