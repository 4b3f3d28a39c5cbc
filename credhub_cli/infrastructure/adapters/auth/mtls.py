"""Mutual TLS authentication strategy."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from .base import BaseAuthStrategy, TLSConfig, build_http_client


@dataclass(frozen=True, slots=True)
class MutualTLSConfig:
    """Client certificate and key file paths used for the TLS handshake."""

    certificate: str
    private_key: str
    tls: TLSConfig = field(default_factory=TLSConfig)


class MutualTLSStrategy(BaseAuthStrategy):
    """
    Authenticate by presenting a client certificate.

    No secret is exchanged: client and server each present a certificate
    during the handshake, so requests are sent without extra headers.
    """

    def __init__(self, config: MutualTLSConfig, *, http_client: httpx.Client | None = None) -> None:
        super().__init__(
            http_client
            or build_http_client(config.tls, client_cert=(config.certificate, config.private_key))
        )

    def _send(self, request: httpx.Request) -> httpx.Response:
        return self._http.send(request)
