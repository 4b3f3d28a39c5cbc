"""
Decoding of CredHub responses into credential envelopes and typed values.

A response is decoded in two steps. ``decode_envelopes`` turns the body into
envelopes whose ``value`` is still the raw JSON node. ``decode_typed`` then
checks the envelope's type tag and validates the node against the shape of
that variant.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from ....domain.entities import Credential
from ....domain.exceptions import DecodeError, EmptyResultError
from ....domain.value_objects import CredentialType, CredentialValue
from .models import (
    CertificateValue,
    CredentialResponse,
    GenericValue,
    JSONValue,
    PathsResponse,
    RSAValue,
    ScalarValue,
    SSHValue,
    UserValue,
)

ValueDecoder = Callable[[Any], CredentialValue]

VALUE_DECODERS: dict[CredentialType, ValueDecoder] = {
    CredentialType.PASSWORD: ScalarValue.validate_python,
    CredentialType.VALUE: ScalarValue.validate_python,
    CredentialType.JSON: JSONValue.validate_python,
    CredentialType.CERTIFICATE: lambda node: CertificateValue.model_validate(node).to_domain(),
    CredentialType.SSH: lambda node: SSHValue.model_validate(node).to_domain(),
    CredentialType.RSA: lambda node: RSAValue.model_validate(node).to_domain(),
    CredentialType.USER: lambda node: UserValue.model_validate(node).to_domain(),
}


def decode_envelopes(raw_body: str | bytes) -> list[Credential[Any]]:
    """
    Decode a response body into credential envelopes, in server order.

    Args:
        raw_body: The response body, expected to be ``{"data": [...]}``.

    Returns:
        One envelope per element of ``data``. Values are left undecoded.

    Raises:
        DecodeError: If the body is not JSON or has no ``data`` array.
        EmptyResultError: If ``data`` is empty.
    """
    try:
        document = CredentialResponse.model_validate_json(raw_body)
    except ValidationError as e:
        msg = f"failed to decode credential response: {_first_error(e)}"
        raise DecodeError(msg) from e

    if document.data is None:
        raise DecodeError(document.error or "response did not contain a data array")
    if not document.data:
        raise EmptyResultError

    return [envelope.to_domain() for envelope in document.data]


def decode_typed(envelope: Credential[Any], expected_type: CredentialType) -> Credential[Any]:
    """
    Decode an envelope's value as the variant for ``expected_type``.

    Raises:
        DecodeError: If the envelope has another type, or its value does not
            have the variant's shape.
    """
    if envelope.type != expected_type:
        msg = f"credential {envelope.name} is of type {envelope.type}, not {expected_type}"
        raise DecodeError(msg)

    return envelope.with_value(_decode_node(envelope, VALUE_DECODERS[expected_type], str(expected_type)))


def decode_value(envelope: Credential[Any]) -> Credential[Any]:
    """
    Decode an envelope's value by its own type tag.

    Tags outside the known set decode to a generic mapping.
    """
    credential_type = envelope.credential_type
    if credential_type is not None:
        return decode_typed(envelope, credential_type)
    return envelope.with_value(_decode_node(envelope, GenericValue.validate_python, "generic"))


def decode_paths(raw_body: str | bytes) -> list[str]:
    """
    Decode a path listing body into credential paths.

    Raises:
        DecodeError: If the body is not JSON or has no ``paths`` array.
    """
    try:
        document = PathsResponse.model_validate_json(raw_body)
    except ValidationError as e:
        msg = f"failed to decode path listing: {_first_error(e)}"
        raise DecodeError(msg) from e

    if document.paths is None:
        raise DecodeError(document.error or "response did not contain a paths array")

    return [entry.path for entry in document.paths]


def _decode_node(envelope: Credential[Any], decoder: ValueDecoder, shape: str) -> CredentialValue:
    try:
        return decoder(envelope.value)
    except ValidationError as e:
        msg = f"value of credential {envelope.name} is not a valid {shape} value: {_first_error(e)}"
        raise DecodeError(msg) from e


def _first_error(error: ValidationError) -> str:
    details = error.errors(include_url=False)
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]
