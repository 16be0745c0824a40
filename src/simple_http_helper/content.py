"""Request content variants.

Each variant knows how parameters map onto an HTTP request (query string,
JSON body, or LogInsight style path segments) and how to turn itself into an
``httpx.Request``. A content object is created for a single dispatch and is
never reused.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Sequence
from urllib.parse import urlencode

import httpx

from .errors import UnsupportedEncodingError
from .uri import append_path, escape_segment, replace_query, validate

JSON_CONTENT_TYPE = "application/json"

QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]]


class HttpContent(ABC):
    """Base request descriptor holding the URI and the header set."""

    method: ClassVar[str]

    def __init__(self, uri: str) -> None:
        self.uri = uri
        self.headers: dict[str, str] = {}

    def attach_headers(self, headers: Mapping[str, str]) -> None:
        """Replace the full header set; the last call wins.

        An explicit ``Content-Type`` here takes precedence over the one a
        variant derives from its body encoding.
        """
        self.headers = dict(headers)

    @abstractmethod
    def attach_parameters(self, params: Any) -> None: ...

    @abstractmethod
    def materialize_request(self) -> httpx.Request: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.method} {self.uri})"


def _encode_query(params: QueryParams) -> str:
    return urlencode(params, doseq=True)


class RichBodyContent(HttpContent):
    """Carries parameters as a JSON body (POST, PATCH)."""

    def __init__(self, uri: str) -> None:
        super().__init__(uri)
        self.body: bytes | None = None
        self.content_type: str | None = None
        self.encoding: str | None = None

    def attach_parameters(self, params: Any, encoding: str = "json") -> None:
        if encoding != "json":
            raise UnsupportedEncodingError(
                f"only json is supported, {encoding} is not supported",
                context=encoding,
            )
        try:
            payload = json.dumps(params)
        except (TypeError, ValueError) as exc:
            raise UnsupportedEncodingError(f"Cannot encode parameters as json: {exc}", context=params) from exc

        self.body = payload.encode("utf-8")
        self.content_type = JSON_CONTENT_TYPE
        self.encoding = encoding

    def attach_url_parameters(self, params: QueryParams) -> None:
        self.uri = replace_query(self.uri, _encode_query(params))

    def materialize_request(self) -> httpx.Request:
        headers = httpx.Headers(self.headers)
        if self.content_type and "content-type" not in headers:
            headers["Content-Type"] = self.content_type
        return httpx.Request(self.method, self.uri, headers=headers, content=self.body)


class PostContent(RichBodyContent):
    method = "POST"


class PatchContent(RichBodyContent):
    method = "PATCH"


class RichUrlContent(HttpContent):
    """Carries parameters in the query string (GET, DELETE)."""

    def attach_parameters(self, params: QueryParams) -> None:
        self.uri = replace_query(self.uri, _encode_query(params))

    def materialize_request(self) -> httpx.Request:
        return httpx.Request(self.method, self.uri, headers=self.headers)


class GetContent(RichUrlContent):
    method = "GET"


class DeleteContent(RichUrlContent):
    method = "DELETE"


class LoginsightGetContent(GetContent):
    """GET whose filters are encoded as ``/key/value`` path segments.

    ``{"field": ["a", "b"], "region": "us"}`` appends
    ``/field/a/field/b/region/us``. Keys and values are escaped one at a time,
    so segments added by an earlier call are left alone.
    """

    def attach_path_segment_parameters(self, params: Mapping[str, str | Sequence[str]]) -> None:
        segments: list[str] = []
        for key, expression in params.items():
            if expression is None:
                continue
            if isinstance(expression, (str, bytes)) or not isinstance(expression, Sequence):
                expressions: Sequence[Any] = [expression]
            else:
                expressions = expression
            for value in expressions:
                if isinstance(value, bytes):
                    value = value.decode("utf-8")
                segments.append(escape_segment(key))
                segments.append(escape_segment(value))

        self.uri = validate(append_path(self.uri, segments))


__all__ = [
    "DeleteContent",
    "GetContent",
    "HttpContent",
    "JSON_CONTENT_TYPE",
    "LoginsightGetContent",
    "PatchContent",
    "PostContent",
    "RichBodyContent",
    "RichUrlContent",
]
