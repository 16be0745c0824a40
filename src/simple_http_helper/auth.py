"""Basic authentication for outgoing requests."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

import httpx

from .logger import BoundLogger


@dataclass(frozen=True)
class Credential:
    username: str
    password: str = field(repr=False)

    def authorization_header(self) -> str:
        userpass = f"{self.username}:{self.password}".encode("utf-8")
        return "Basic " + base64.b64encode(userpass).decode("ascii")


class AuthManager:
    """Holds the optional credential and applies it to outgoing requests."""

    def __init__(self, logger: BoundLogger) -> None:
        self._logger = logger.child("auth")
        self._credential: Credential | None = None

    @property
    def credential(self) -> Credential | None:
        return self._credential

    @property
    def has_credentials(self) -> bool:
        return self._credential is not None

    def set(self, username: str, password: str) -> Credential:
        self._credential = Credential(username, password)
        self._logger.debug("Basic auth configured for user %s", username)
        return self._credential

    def clear(self) -> None:
        self._credential = None

    def apply(self, request: httpx.Request) -> httpx.Request:
        if self._credential is None:
            return request
        self._logger.trace("Attaching basic auth for %s", self._credential.username)
        request.headers["Authorization"] = self._credential.authorization_header()
        return request


__all__ = ["AuthManager", "Credential"]
