"""Credential type value object."""

from enum import StrEnum, auto


class CredentialType(StrEnum):
    """Type tag selecting the shape of a credential value."""

    PASSWORD = auto()
    VALUE = auto()
    JSON = auto()
    CERTIFICATE = auto()
    SSH = auto()
    RSA = auto()
    USER = auto()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, tag: str) -> "CredentialType | None":
        """Return the member for a wire tag, or None for tags outside the known set."""
        try:
            return cls(tag)
        except ValueError:
            return None

    @property
    def is_scalar(self) -> bool:
        """Whether values of this type are plain strings."""
        return self in (CredentialType.PASSWORD, CredentialType.VALUE)
