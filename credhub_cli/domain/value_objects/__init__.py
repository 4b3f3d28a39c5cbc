"""Domain value objects - Immutable objects defined by their attributes."""

from .credential_type import CredentialType
from .credential_values import (
    RSA,
    SSH,
    Certificate,
    CredentialValue,
    GenericMapping,
    JSONDocument,
    StructuredValue,
    User,
)

__all__ = [
    "RSA",
    "SSH",
    "Certificate",
    "CredentialType",
    "CredentialValue",
    "GenericMapping",
    "JSONDocument",
    "StructuredValue",
    "User",
]
