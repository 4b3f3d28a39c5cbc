"""Infrastructure adapters - Implementations of application ports."""

from .auth import MutualTLSStrategy, TokenStrategy
from .credhub import CredHubClient

__all__ = [
    "CredHubClient",
    "MutualTLSStrategy",
    "TokenStrategy",
]
