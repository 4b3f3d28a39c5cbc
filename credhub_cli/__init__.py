"""Command line client and library for reading typed credentials from CredHub."""

from .domain.entities import Credential
from .domain.exceptions import DecodeError, DomainError, EmptyResultError
from .infrastructure.adapters import CredHubClient, MutualTLSStrategy, TokenStrategy

__all__ = [
    "CredHubClient",
    "Credential",
    "DecodeError",
    "DomainError",
    "EmptyResultError",
    "MutualTLSStrategy",
    "TokenStrategy",
]
