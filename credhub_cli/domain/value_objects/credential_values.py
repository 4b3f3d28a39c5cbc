"""Credential value variants.

Each credential type carries a value of a fixed shape. Scalar types
(``password`` and ``value``) are plain strings, ``json`` is an arbitrary
structured document, and anything the client does not recognise is kept as a
generic mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, TypeAlias

JSONDocument: TypeAlias = dict[str, Any] | list[Any]
GenericMapping: TypeAlias = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Certificate:
    """A certificate with its signing CA and private key."""

    ca: str = ""
    certificate: str = ""
    private_key: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SSH:
    """An SSH key pair. The fingerprint is computed by the server."""

    public_key: str = ""
    private_key: str = ""
    public_key_fingerprint: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RSA:
    """An RSA key pair."""

    public_key: str = ""
    private_key: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class User:
    """A username with an optional password and password hash."""

    username: str = ""
    password: str = ""
    password_hash: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


StructuredValue: TypeAlias = Certificate | SSH | RSA | User
CredentialValue: TypeAlias = str | JSONDocument | StructuredValue | GenericMapping
