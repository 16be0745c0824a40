"""URI assembly and escaping helpers."""

from __future__ import annotations

from typing import Iterable
from urllib.parse import quote, urlsplit, urlunsplit

import httpx

from .errors import InvalidURIError

# Reserved and unreserved characters are kept; everything else is percent-encoded.
# Path parts never keep "?", "#", "[" or "]".
URI_SAFE_CHARS = "!*'();:@&=+$,/?[]~"
PATH_SAFE_CHARS = "!*'();:@&=+$,/~"
SEGMENT_SAFE_CHARS = "!*'();:@&=+$,~"


def escape(value: str, *, safe: str = URI_SAFE_CHARS) -> str:
    try:
        return quote(value, safe=safe, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise InvalidURIError(f"Cannot escape {value!r}: {exc}", context=value) from exc


def escape_segment(value: object) -> str:
    """Percent-encode a single path segment, ``/`` included."""
    return escape(str(value), safe=SEGMENT_SAFE_CHARS)


def build_uri(
    scheme: str,
    host: str,
    port: int | None,
    base_path: str,
    args: Iterable[object] = (),
) -> str:
    """Assemble ``scheme://host[:port]/base_path[/arg...]`` and escape it.

    Arguments are converted with ``str()``, escaped one by one and joined
    with ``/``; an empty argument list adds nothing to the path. IPv6 hosts
    are bracketed. The escaped URI is parsed back with httpx so malformed
    input fails here instead of at send time.
    """
    if not host:
        raise InvalidURIError("Host must not be empty", context=host)

    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    port_str = f":{port}" if port is not None else ""
    parts = [base_path.strip("/")] if base_path and base_path.strip("/") else []
    parts.extend(str(arg) for arg in args)
    path = "/".join(escape(part, safe=PATH_SAFE_CHARS) for part in parts)
    authority = escape(f"{scheme}://{host}{port_str}")
    return validate(f"{authority}/{path}")


def validate(uri: str) -> str:
    try:
        parsed = httpx.URL(uri)
    except httpx.InvalidURL as exc:
        raise InvalidURIError(f"Invalid URI {uri!r}: {exc}", context=uri) from exc
    if not parsed.host:
        raise InvalidURIError(f"URI {uri!r} has no host", context=uri)
    return uri


def replace_query(uri: str, query: str) -> str:
    parts = urlsplit(uri)
    return urlunsplit(parts._replace(query=query))


def append_path(uri: str, segments: Iterable[str]) -> str:
    """Append already escaped segments to the path, keeping query and fragment."""
    parts = urlsplit(uri)
    suffix = "".join(f"/{segment}" for segment in segments)
    if not suffix:
        return uri
    return urlunsplit(parts._replace(path=parts.path.rstrip("/") + suffix))


__all__ = [
    "append_path",
    "build_uri",
    "escape",
    "escape_segment",
    "replace_query",
    "validate",
]
