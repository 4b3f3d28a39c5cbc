"""Credential entity: one version of a named credential."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from ..value_objects import CredentialType

ValueT = TypeVar("ValueT")


@dataclass(frozen=True, slots=True)
class Credential(Generic[ValueT]):
    """
    A single credential version as returned by the server.

    The envelope fields are identical for every credential type; only the
    shape of ``value`` varies. Envelopes built straight from a response hold
    the raw JSON value, typed envelopes hold one of the value variants.
    """

    id: str
    name: str
    type: str
    value: ValueT
    version_created_at: str

    @property
    def credential_type(self) -> CredentialType | None:
        """The known type for this credential's tag, if any."""
        return CredentialType.parse(self.type)

    def with_value(self, value: Any) -> Credential[Any]:
        """Return a copy of this envelope carrying a decoded value."""
        return replace(self, value=value)
