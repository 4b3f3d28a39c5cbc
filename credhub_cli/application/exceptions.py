"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class TransportError(ApplicationError):
    """Raised when a request cannot be delivered or yields no usable response."""


class AuthenticationError(TransportError):
    """Raised when the request signer cannot obtain credentials for a request."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""
