"""OAuth2 bearer token strategy backed by a UAA server."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import ClassVar

import httpx

from ....application.exceptions import AuthenticationError
from .base import BaseAuthStrategy, TLSConfig, build_http_client


@dataclass(frozen=True, slots=True)
class TokenConfig:
    """Configuration for the UAA token strategy."""

    auth_url: str
    client_id: str
    client_secret: str = ""
    username: str = ""
    password: str = ""
    tls: TLSConfig = field(default_factory=TLSConfig)

    @property
    def grant_type(self) -> str:
        """``password`` when a user is configured, otherwise ``client_credentials``."""
        return "password" if self.username else "client_credentials"


class TokenStrategy(BaseAuthStrategy):
    """
    Sign requests with a bearer token obtained from UAA.

    The token is cached until shortly before it expires. When CredHub
    rejects it as ``invalid_token`` a new one is fetched and the request is
    sent once more.
    """

    TOKEN_PATH: ClassVar[str] = "/oauth/token"
    REFRESH_MARGIN: ClassVar[timedelta] = timedelta(seconds=60)

    def __init__(self, config: TokenConfig, *, http_client: httpx.Client | None = None) -> None:
        """
        Initialize the strategy.

        Args:
            config: UAA location and client or user credentials.
            http_client: Client to send through. Built from ``config.tls``
                when omitted.
        """
        super().__init__(http_client or build_http_client(config.tls))
        self._config = config
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._lock = threading.Lock()

    def _send(self, request: httpx.Request) -> httpx.Response:
        response = self._http.send(self._authorize(request, self._acquire_token()))
        if self._is_invalid_token(response):
            self._logger.debug("Access token rejected, requesting a new one")
            response = self._http.send(self._authorize(request, self._acquire_token(force=True)))
        return response

    @staticmethod
    def _authorize(request: httpx.Request, token: str) -> httpx.Request:
        """Return a copy of ``request`` carrying the bearer token."""
        headers = request.headers.copy()
        headers["Authorization"] = f"Bearer {token}"
        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            content=request.content,
            extensions=request.extensions,
        )

    @staticmethod
    def _is_invalid_token(response: httpx.Response) -> bool:
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return False
        try:
            body = response.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("error") == "invalid_token"

    def _acquire_token(self, *, force: bool = False) -> str:
        """Return the cached token, fetching a new one when missing, stale or forced."""
        with self._lock:
            if (
                not force
                and self._access_token
                and self._token_expiry
                and datetime.now(UTC) < self._token_expiry
            ):
                return self._access_token

            url = f"{self._config.auth_url.rstrip('/')}{self.TOKEN_PATH}"
            self._logger.debug("Requesting %s token from %s", self._config.grant_type, url)
            try:
                response = self._http.post(
                    url,
                    data=self._grant(),
                    auth=(self._config.client_id, self._config.client_secret),
                    headers={"Accept": "application/json"},
                )
            except httpx.HTTPError as e:
                msg = f"Failed to reach authorization server: {e}"
                raise AuthenticationError(msg) from e

            try:
                result = response.json()
            except ValueError:
                result = {}
            if not isinstance(result, dict):
                result = {}

            if response.is_error or "access_token" not in result:
                error = result.get(
                    "error_description",
                    result.get("error", f"status {response.status_code}"),
                )
                msg = f"Failed to acquire access token: {error}"
                raise AuthenticationError(msg)

            try:
                expires_in = int(result.get("expires_in", 3600))
            except (TypeError, ValueError) as e:
                msg = f"Failed to acquire access token: invalid expires_in {result.get('expires_in')!r}"
                raise AuthenticationError(msg) from e

            self._access_token = result["access_token"]
            self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in) - self.REFRESH_MARGIN

            return self._access_token

    def _grant(self) -> dict[str, str]:
        grant = {"grant_type": self._config.grant_type, "response_type": "token"}
        if self._config.username:
            grant["username"] = self._config.username
            grant["password"] = self._config.password
        return grant
