"""Request signers - implementations of the RequestSigner port."""

from .base import BaseAuthStrategy, TLSConfig
from .mtls import MutualTLSConfig, MutualTLSStrategy
from .uaa import TokenConfig, TokenStrategy

__all__ = [
    "BaseAuthStrategy",
    "MutualTLSConfig",
    "MutualTLSStrategy",
    "TLSConfig",
    "TokenConfig",
    "TokenStrategy",
]
