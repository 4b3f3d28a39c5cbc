"""Application ports - Interfaces for external adapters."""

from .credential_repository import CredentialRepository
from .request_signer import RequestSigner

__all__ = [
    "CredentialRepository",
    "RequestSigner",
]
