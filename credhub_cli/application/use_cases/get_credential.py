"""Use case for reading credential versions and paths."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...domain.entities import Credential
from ..ports import CredentialRepository

logger = logging.getLogger(__name__)

ValueDecoder = Callable[[Credential[Any]], Credential[Any]]


@dataclass(frozen=True, slots=True)
class GetResult:
    """Credential versions returned by a get, most recent first."""

    credentials: list[Credential[Any]]
    all_versions: bool

    @property
    def latest(self) -> Credential[Any]:
        """The most recent version."""
        return self.credentials[0]


class GetCredential:
    """
    Use case for fetching one or more versions of a named credential.

    Raw envelopes from the repository are run through ``value_decoder`` so
    callers receive each value in the shape its type tag names.
    """

    def __init__(
        self,
        credential_repository: CredentialRepository,
        value_decoder: ValueDecoder,
    ) -> None:
        """
        Initialize the use case.

        Args:
            credential_repository: Adapter for retrieving credentials.
            value_decoder: Decodes an envelope's raw value by its own type tag.
        """
        self._repository = credential_repository
        self._decode = value_decoder

    def execute(self, name: str, versions: int | None = None) -> GetResult:
        """
        Fetch the latest version, or the last ``versions`` versions, of ``name``.

        Raises:
            ValueError: If ``versions`` is less than 1.
            DecodeError: If the response or a value cannot be decoded.
            EmptyResultError: If the credential has no versions.
        """
        if versions is None:
            logger.debug("Fetching latest version of %s", name)
            credentials = [self._repository.get_latest_version(name)]
        else:
            logger.debug("Fetching %d versions of %s", versions, name)
            credentials = self._repository.get_n_versions(name, versions)

        return GetResult(
            credentials=[self._decode(credential) for credential in credentials],
            all_versions=versions is not None,
        )


class FindPaths:
    """Use case for listing every credential path."""

    def __init__(self, credential_repository: CredentialRepository) -> None:
        self._repository = credential_repository

    def execute(self) -> list[str]:
        paths = self._repository.find_all_paths()
        logger.debug("Found %d credential paths", len(paths))
        return paths
