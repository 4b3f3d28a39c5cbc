"""Base request signer with shared transport handling."""

from __future__ import annotations

import logging
import ssl
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Self

import httpx

from ....application.exceptions import ConfigurationError, TransportError

PEM_MARKER = "-----BEGIN"


@dataclass(frozen=True, slots=True)
class TLSConfig:
    """TLS settings shared by every auth strategy."""

    ca_cert: str = ""
    skip_tls_validation: bool = False
    timeout: float = 30.0


def create_ssl_context(
    config: TLSConfig,
    *,
    client_cert: tuple[str, str] | None = None,
) -> ssl.SSLContext:
    """
    Build the SSL context for talking to CredHub or UAA.

    Args:
        config: TLS settings. ``ca_cert`` may be a file path or PEM text.
        client_cert: Optional ``(certificate, private_key)`` file paths
            presented during the handshake.

    Raises:
        ConfigurationError: If the CA bundle or client certificate cannot be loaded.
    """
    inline_ca = config.ca_cert.lstrip().startswith(PEM_MARKER)
    try:
        if inline_ca:
            context = ssl.create_default_context(cadata=config.ca_cert)
        else:
            context = ssl.create_default_context(cafile=config.ca_cert or None)
    except (OSError, ValueError) as e:
        source = "inline PEM" if inline_ca else config.ca_cert
        msg = f"Failed to load CA certificate from {source}: {e}"
        raise ConfigurationError(msg) from e

    if config.skip_tls_validation:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

    if client_cert is not None:
        certificate, private_key = client_cert
        try:
            context.load_cert_chain(certfile=certificate, keyfile=private_key)
        except OSError as e:
            msg = f"Failed to load client certificate {certificate} with key {private_key}: {e}"
            raise ConfigurationError(msg) from e

    return context


def build_http_client(
    config: TLSConfig,
    *,
    client_cert: tuple[str, str] | None = None,
) -> httpx.Client:
    """Create the ``httpx.Client`` a strategy sends through."""
    return httpx.Client(
        verify=create_ssl_context(config, client_cert=client_cert),
        timeout=config.timeout,
    )


class BaseAuthStrategy(ABC):
    """
    Abstract base class for request signers.

    Subclasses authenticate and send a request in ``_send``. This class turns
    transport failures into ``TransportError`` and rejects error responses
    that carry no body, since nothing downstream could decode them.
    """

    def __init__(self, http_client: httpx.Client) -> None:
        """Initialize the strategy with the client it sends through."""
        self._logger = logging.getLogger(self.__class__.__name__)
        self._http = http_client

    def execute(self, request: httpx.Request) -> httpx.Response:
        """Authenticate and send ``request``, returning the server's response."""
        self._logger.debug("%s %s", request.method, request.url)
        try:
            response = self._send(request)
        except httpx.HTTPError as e:
            msg = f"request to {request.url.host} failed: {e}"
            raise TransportError(msg) from e

        self._logger.debug("Response status %d", response.status_code)
        if response.is_error and not response.content:
            msg = f"server responded with status {response.status_code} and an empty body"
            raise TransportError(msg)
        return response

    @abstractmethod
    def _send(self, request: httpx.Request) -> httpx.Response:
        """Attach authentication to the request and send it."""
        ...

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
