"""CredHub credential retrieval client."""

from __future__ import annotations

from typing import Any, ClassVar
from urllib.parse import urlencode

import httpx

from ....application.ports import RequestSigner
from ....domain.entities import Credential
from ....domain.value_objects import RSA, SSH, Certificate, CredentialType, JSONDocument, User
from .decoder import decode_envelopes, decode_paths, decode_typed


class CredHubClient:
    """
    Typed read access to the CredHub data API.

    Every operation performs a single GET through the injected request
    signer. Errors raised by the signer reach the caller untouched, and
    status codes are not inspected: the body is decoded whatever the status.

    Usage::

        client = CredHubClient("https://credhub.example.com:8844", signer)
        certificate = client.get_certificate("/deploy/tls")
        print(certificate.value.private_key)
    """

    DATA_PATH: ClassVar[str] = "/api/v1/data"

    def __init__(self, base_url: str, signer: RequestSigner) -> None:
        """
        Initialize the client.

        Args:
            base_url: Scheme, host and port of the CredHub server.
            signer: Authenticates and sends each request.
        """
        self._base_url = base_url.rstrip("/")
        self._signer = signer

    @property
    def base_url(self) -> str:
        return self._base_url

    # -- untyped retrieval --------------------------------------------------

    def get_latest_version(self, name: str) -> Credential[Any]:
        """Retrieve the most recent version of ``name`` with its raw value."""
        return self.get_n_versions(name, 1)[0]

    def get_n_versions(self, name: str, versions: int) -> list[Credential[Any]]:
        """
        Retrieve up to ``versions`` versions of ``name``, most recent first.

        Args:
            name: Absolute credential name, e.g. ``/deploy/db-password``.
            versions: Number of versions to request, at least 1.

        Returns:
            The envelopes returned by the server, in server order.

        Raises:
            ValueError: If ``versions`` is less than 1.
            DecodeError: If the response cannot be decoded.
            EmptyResultError: If the credential has no versions.
        """
        if versions < 1:
            msg = f"versions must be at least 1, got {versions}"
            raise ValueError(msg)

        response = self._get({"name": name, "versions": versions})
        return decode_envelopes(response.content)

    # -- typed retrieval ----------------------------------------------------

    def get_password(self, name: str) -> Credential[str]:
        return self._get_typed(name, CredentialType.PASSWORD)

    def get_value(self, name: str) -> Credential[str]:
        return self._get_typed(name, CredentialType.VALUE)

    def get_json(self, name: str) -> Credential[JSONDocument]:
        return self._get_typed(name, CredentialType.JSON)

    def get_certificate(self, name: str) -> Credential[Certificate]:
        return self._get_typed(name, CredentialType.CERTIFICATE)

    def get_ssh(self, name: str) -> Credential[SSH]:
        return self._get_typed(name, CredentialType.SSH)

    def get_rsa(self, name: str) -> Credential[RSA]:
        return self._get_typed(name, CredentialType.RSA)

    def get_user(self, name: str) -> Credential[User]:
        return self._get_typed(name, CredentialType.USER)

    # -- paths --------------------------------------------------------------

    def find_all_paths(self) -> list[str]:
        """Retrieve every credential path visible to the caller."""
        response = self._get({"paths": "true"})
        return decode_paths(response.content)

    # -- internals ----------------------------------------------------------

    def _get_typed(self, name: str, credential_type: CredentialType) -> Credential[Any]:
        return decode_typed(self.get_latest_version(name), credential_type)

    def _get(self, params: dict[str, Any]) -> httpx.Response:
        url = f"{self._base_url}{self.DATA_PATH}?{urlencode(params)}"
        return self._signer.execute(httpx.Request("GET", url))
