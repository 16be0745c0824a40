"""Shared value types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Endpoint:
    host: str
    port: int | None = None
    base_path: str = ""


__all__ = ["Endpoint"]
