"""Domain exceptions."""

EMPTY_RESULT_MESSAGE = "response did not contain any credentials"


class DomainError(Exception):
    """Base exception for domain errors."""


class DecodeError(DomainError):
    """Raised when a response body or credential value cannot be decoded."""


class EmptyResultError(DomainError):
    """Raised when a well-formed response contains no credentials."""

    def __init__(self, message: str = EMPTY_RESULT_MESSAGE) -> None:
        super().__init__(message)
