"""Response body decoding helpers."""

from __future__ import annotations

import json
from typing import Any

from .errors import MalformedResponseError


def decode_body(body: bytes | None) -> str:
    return (body or b"").decode("utf-8", errors="replace")


def parse_json_body(text: str) -> Any:
    """Decode a JSON document; an empty or blank body yields ``None``."""
    if not text.strip():
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Invalid JSON response: {exc}", context=text) from exc


__all__ = ["decode_body", "parse_json_body"]
