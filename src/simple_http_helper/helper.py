"""Request helpers that assemble, authenticate and dispatch HTTP calls."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar
from urllib.parse import urlsplit

from .auth import AuthManager, Credential
from .content import (
    DeleteContent,
    GetContent,
    HttpContent,
    LoginsightGetContent,
    PatchContent,
    PostContent,
    RichBodyContent,
    RichUrlContent,
)
from .logger import LogLevel, create_logger
from .result import SimpleHttpResult
from .transport import HttpxTransport, Transport
from .types import Endpoint
from .uri import build_uri

Configure = Callable[[Any], object]


@dataclass
class HelperOptions:
    host: str
    port: int | None = None
    path: str = ""
    debug: bool = False
    timeout: float = 60.0
    transport: Transport | None = None
    logger: object | None = None
    log_level: LogLevel = "info"


class SimpleRequestHelper(ABC):
    """Builds one request per call against a fixed endpoint.

    Every public verb takes positional path arguments and an optional
    ``configure`` callback that receives the content object before it is
    sent, e.g.::

        helper.get("users", configure=lambda c: c.attach_parameters({"page": 2}))

    Non-2xx responses are returned as unsuccessful results, never raised.
    """

    scheme: ClassVar[str]

    def __init__(
        self,
        host: str,
        port: int | None = None,
        path: str = "",
        *,
        debug: bool = False,
        timeout: float = 60.0,
        transport: Transport | None = None,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = HelperOptions(
            host=host,
            port=port,
            path=path,
            debug=debug,
            timeout=timeout,
            transport=transport,
            logger=logger,
            log_level=log_level,
        )
        self.endpoint = Endpoint(options.host, options.port, options.path or "")
        self.debug = options.debug
        self.timeout = options.timeout
        self._transport = options.transport
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._auth_manager = AuthManager(self._logger)
        self._logger.debug(
            "Initializing %s for %s:%s/%s", type(self).__name__, host, port or "", self.endpoint.base_path
        )

    @property
    def host(self) -> str:
        return self.endpoint.host

    @property
    def port(self) -> int | None:
        return self.endpoint.port

    @property
    def path(self) -> str:
        return self.endpoint.base_path

    @property
    def credential(self) -> Credential | None:
        return self._auth_manager.credential

    def set_auth(self, username: str, password: str) -> None:
        self._auth_manager.set(username, password)

    def clear_auth(self) -> None:
        self._auth_manager.clear()

    def get(self, *args: object, configure: Configure | None = None) -> SimpleHttpResult:
        return self._send_request(GetContent, args, configure)

    def post(self, *args: object, configure: Configure | None = None) -> SimpleHttpResult:
        return self._send_request(PostContent, args, configure)

    def patch(self, *args: object, configure: Configure | None = None) -> SimpleHttpResult:
        return self._send_request(PatchContent, args, configure)

    def delete(self, *args: object, configure: Configure | None = None) -> SimpleHttpResult:
        return self._send_request(DeleteContent, args, configure)

    def loginsight_get(self, *args: object, configure: Configure | None = None) -> SimpleHttpResult:
        return self._send_request(LoginsightGetContent, args, configure)

    @abstractmethod
    def _create_transport(self) -> Transport: ...

    def _base_uri(self, args: tuple[object, ...]) -> str:
        return build_uri(self.scheme, self.endpoint.host, self.endpoint.port, self.endpoint.base_path, args)

    def _send_request(
        self,
        content_class: type[RichBodyContent] | type[RichUrlContent],
        args: tuple[object, ...],
        configure: Configure | None,
    ) -> SimpleHttpResult:
        content: HttpContent = content_class(self._base_uri(args))
        if configure is not None:
            configure(content)

        request = self._auth_manager.apply(content.materialize_request())
        if self.debug:
            self._logger.emit("info", "%s %s", content.method, content.uri)
        else:
            self._logger.trace("%s %s", content.method, content.uri)

        if self._transport is not None:
            response = self._transport.send(request)
        else:
            transport = self._create_transport()
            try:
                response = transport.send(request)
            finally:
                transport.close()

        result = SimpleHttpResult(response)
        if not result.is_success():
            self._logger.debug("%s %s returned status=%s", content.method, content.uri, result.status_code)
        return result


class SimpleHttpHelper(SimpleRequestHelper):
    scheme = "http"

    def _create_transport(self) -> Transport:
        return HttpxTransport(timeout=self.timeout, logger=self._logger)


class SimpleHttpsHelper(SimpleRequestHelper):
    scheme = "https"

    def _create_transport(self) -> Transport:
        return HttpxTransport(verify=True, timeout=self.timeout, logger=self._logger)


def create_helper(base_url: str, **kwargs: Any) -> SimpleRequestHelper:
    """Pick the plain or TLS helper from ``http(s)://host[:port][/path]``."""
    normalized = base_url if "://" in base_url else f"http://{base_url}"
    parsed = urlsplit(normalized)
    scheme = parsed.scheme.lower()
    host = parsed.hostname or "localhost"
    path = parsed.path.strip("/")

    if scheme == "http":
        return SimpleHttpHelper(host, parsed.port, path, **kwargs)
    if scheme == "https":
        return SimpleHttpsHelper(host, parsed.port, path, **kwargs)

    raise ValueError(f"Unsupported scheme: {scheme}")


__all__ = [
    "HelperOptions",
    "SimpleHttpHelper",
    "SimpleHttpsHelper",
    "SimpleRequestHelper",
    "create_helper",
]
