"""Wire models for CredHub API responses."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ....domain.entities import Credential
from ....domain.value_objects import RSA, SSH, Certificate, User


class WireModel(BaseModel):
    """Base for response models: immutable, unknown fields ignored."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class EnvelopeModel(WireModel):
    """One credential version inside a ``data`` array."""

    id: str = ""
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    value: Any = None
    version_created_at: str = ""

    def to_domain(self) -> Credential[Any]:
        return Credential(
            id=self.id,
            name=self.name,
            type=self.type,
            value=self.value,
            version_created_at=self.version_created_at,
        )


class CredentialResponse(WireModel):
    """Body of ``GET /api/v1/data``: a list of envelopes, or a server error."""

    data: list[EnvelopeModel] | None = None
    error: str | None = None


class PathModel(WireModel):
    path: str


class PathsResponse(WireModel):
    """Body of ``GET /api/v1/data?paths=true``."""

    paths: list[PathModel] | None = None
    error: str | None = None


class CertificateValue(WireModel):
    ca: str | None = None
    certificate: str | None = None
    private_key: str | None = None

    def to_domain(self) -> Certificate:
        return Certificate(
            ca=self.ca or "",
            certificate=self.certificate or "",
            private_key=self.private_key or "",
        )


class SSHValue(WireModel):
    public_key: str | None = None
    private_key: str | None = None
    public_key_fingerprint: str | None = None

    def to_domain(self) -> SSH:
        return SSH(
            public_key=self.public_key or "",
            private_key=self.private_key or "",
            public_key_fingerprint=self.public_key_fingerprint or "",
        )


class RSAValue(WireModel):
    public_key: str | None = None
    private_key: str | None = None

    def to_domain(self) -> RSA:
        return RSA(
            public_key=self.public_key or "",
            private_key=self.private_key or "",
        )


class UserValue(WireModel):
    username: str | None = None
    password: str | None = None
    password_hash: str | None = None

    def to_domain(self) -> User:
        return User(
            username=self.username or "",
            password=self.password or "",
            password_hash=self.password_hash or "",
        )


ScalarValue = TypeAdapter(Annotated[str, Field(min_length=1)])
JSONValue = TypeAdapter(dict[str, Any] | list[Any])
GenericValue = TypeAdapter(dict[str, Any])
