"""Port for credential retrieval - driven/secondary port."""

from typing import Any, Protocol

from ...domain.entities import Credential


class CredentialRepository(Protocol):
    """
    Port for reading credentials from the credential service.

    This is a driven (secondary) port that defines how the application
    retrieves credential versions and paths.
    """

    def get_latest_version(self, name: str) -> Credential[Any]:
        """
        Retrieve the most recent version of a credential.

        Raises:
            DecodeError: If the response cannot be decoded.
            EmptyResultError: If the credential has no versions.
        """
        ...

    def get_n_versions(self, name: str, versions: int) -> list[Credential[Any]]:
        """
        Retrieve up to ``versions`` versions of a credential, most recent first.

        Raises:
            DecodeError: If the response cannot be decoded.
            EmptyResultError: If the credential has no versions.
        """
        ...

    def find_all_paths(self) -> list[str]:
        """Retrieve every credential path visible to the caller."""
        ...
