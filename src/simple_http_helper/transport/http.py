"""HTTP transport built on top of httpx."""

from __future__ import annotations

import httpx

from ..errors import TransportError
from ..logger import BoundLogger, create_logger
from .base import TransportResponse


class HttpxTransport:
    """Sends prepared ``httpx.Request`` objects and returns raw responses."""

    def __init__(
        self,
        *,
        verify: bool = True,
        timeout: float = 60.0,
        client: httpx.Client | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._verify = verify
        self._timeout = timeout
        self._client = client or httpx.Client(verify=verify, timeout=httpx.Timeout(timeout))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    def send(self, request: httpx.Request) -> TransportResponse:
        url = str(request.url)
        try:
            self._logger.debug("HTTP %s %s bytes=%d", request.method, url, len(request.content))
            response = self._client.send(request)
            body = response.content
            self._logger.debug(
                "HTTP <- %s status=%s bytes=%d",
                url,
                response.status_code,
                len(body),
            )
            return TransportResponse(
                status=response.status_code,
                body=body,
                headers={k.lower(): v for k, v in response.headers.items()},
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"HTTP request timeout after {self._timeout}s", context=url) from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Cannot connect to {url}: {exc}", context=url) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["HttpxTransport"]
