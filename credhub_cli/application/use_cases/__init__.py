"""Application use cases."""

from .get_credential import FindPaths, GetCredential, GetResult

__all__ = [
    "FindPaths",
    "GetCredential",
    "GetResult",
]
