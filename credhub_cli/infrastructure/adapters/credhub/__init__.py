"""CredHub API adapter: wire models, response decoding and the retrieval client."""

from .client import CredHubClient
from .decoder import decode_envelopes, decode_paths, decode_typed, decode_value

__all__ = [
    "CredHubClient",
    "decode_envelopes",
    "decode_paths",
    "decode_typed",
    "decode_value",
]
