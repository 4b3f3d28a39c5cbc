"""Domain entities - Objects with identity and lifecycle."""

from .credential import Credential

__all__ = [
    "Credential",
]
