"""Client settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from ...application.exceptions import ConfigurationError
from ..adapters.auth import MutualTLSConfig, TLSConfig, TokenConfig

DEFAULT_CLIENT_ID = "credhub_cli"


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    raw = os.environ.get(key, str(default))
    try:
        return float(raw)
    except ValueError as e:
        msg = f"{key} must be a number of seconds, got {raw!r}"
        raise ConfigurationError(msg) from e


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class Settings:
    """Client settings container."""

    # CredHub server
    server: str = field(default_factory=lambda: _env_str("CREDHUB_SERVER"))
    ca_cert: str = field(default_factory=lambda: _env_str("CREDHUB_CA_CERT"))
    skip_tls_validation: bool = field(default_factory=lambda: _env_bool("CREDHUB_SKIP_TLS_VALIDATION"))
    timeout: float = field(default_factory=lambda: _env_float("CREDHUB_TIMEOUT", 30.0))

    # UAA token auth
    auth_url: str = field(default_factory=lambda: _env_str("CREDHUB_AUTH_URL"))
    client_id: str = field(default_factory=lambda: _env_str("CREDHUB_CLIENT"))
    client_secret: str = field(default_factory=lambda: _env_str("CREDHUB_SECRET"))
    username: str = field(default_factory=lambda: _env_str("CREDHUB_USERNAME"))
    password: str = field(default_factory=lambda: _env_str("CREDHUB_PASSWORD"))

    # Mutual TLS auth
    client_cert: str = field(default_factory=lambda: _env_str("CREDHUB_CLIENT_CERT"))
    client_key: str = field(default_factory=lambda: _env_str("CREDHUB_CLIENT_KEY"))

    log_level: str = field(default_factory=lambda: _env_str("CREDHUB_LOG_LEVEL", "WARNING"))

    @property
    def uses_mutual_tls(self) -> bool:
        """Mutual TLS is used whenever a client certificate and key are set."""
        return bool(self.client_cert and self.client_key)

    @property
    def uses_token(self) -> bool:
        return bool(self.auth_url and (self.client_secret or self.username))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.server:
            missing.append("CREDHUB_SERVER")
        if not (self.uses_mutual_tls or self.uses_token):
            if bool(self.client_cert) != bool(self.client_key):
                missing.append("CREDHUB_CLIENT_KEY" if self.client_cert else "CREDHUB_CLIENT_CERT")
            else:
                if not self.auth_url:
                    missing.append("CREDHUB_AUTH_URL")
                if not (self.client_secret or self.username):
                    missing.append("CREDHUB_SECRET or CREDHUB_USERNAME")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ConfigurationError(msg)

    @cached_property
    def tls_config(self) -> TLSConfig:
        """Get TLS settings shared by both auth strategies."""
        return TLSConfig(
            ca_cert=self.ca_cert,
            skip_tls_validation=self.skip_tls_validation,
            timeout=self.timeout,
        )

    @cached_property
    def token_config(self) -> TokenConfig:
        """Get UAA token strategy configuration."""
        return TokenConfig(
            auth_url=self.auth_url,
            client_id=self.client_id or DEFAULT_CLIENT_ID,
            client_secret=self.client_secret,
            username=self.username,
            password=self.password,
            tls=self.tls_config,
        )

    @cached_property
    def mutual_tls_config(self) -> MutualTLSConfig:
        """Get mutual TLS strategy configuration."""
        return MutualTLSConfig(
            certificate=self.client_cert,
            private_key=self.client_key,
            tls=self.tls_config,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
