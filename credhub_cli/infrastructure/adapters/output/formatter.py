"""Rendering of credentials for terminals and scripts."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from ....application.use_cases import GetResult
from ....domain.entities import Credential
from ....domain.value_objects import StructuredValue

PATHS_HEADER = "Path"
VERSION_SEPARATOR = "\n---\n"


class _CredentialDumper(yaml.SafeDumper):
    """Safe dumper that writes multi-line strings (PEM blocks) as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    style = "|" if "\n" in data else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_CredentialDumper.add_representer(str, _represent_str)


def to_plain(value: Any) -> Any:
    """Convert a decoded credential value to plain JSON-compatible data."""
    if isinstance(value, StructuredValue):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def credential_to_dict(credential: Credential[Any]) -> dict[str, Any]:
    return {
        "id": credential.id,
        "name": credential.name,
        "type": credential.type,
        "value": to_plain(credential.value),
        "version_created_at": credential.version_created_at,
    }


def _result_document(result: GetResult) -> dict[str, Any]:
    if result.all_versions:
        return {"versions": [credential_to_dict(c) for c in result.credentials]}
    return credential_to_dict(result.latest)


def _dump(document: dict[str, Any]) -> str:
    return yaml.dump(
        document,
        Dumper=_CredentialDumper,
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    ).rstrip("\n")


def render_text(result: GetResult) -> str:
    """
    Render credentials as YAML ``key: value`` lines for reading in a terminal.

    When several versions were requested each one is its own block, newest
    first, separated by ``---`` lines.
    """
    if result.all_versions:
        return VERSION_SEPARATOR.join(_dump(credential_to_dict(c)) for c in result.credentials)
    return _dump(credential_to_dict(result.latest))


def render_json(result: GetResult) -> str:
    """Render credentials as indented JSON."""
    return json.dumps(_result_document(result), indent=2)


def select_key(credential: Credential[Any], key: str) -> str:
    """
    Return one field of a credential's value.

    String fields are returned verbatim, anything else as JSON.

    Raises:
        ValueError: If the value has no fields or lacks ``key``.
    """
    value = to_plain(credential.value)
    if not isinstance(value, dict):
        msg = f"credential {credential.name} of type {credential.type} has no fields"
        raise ValueError(msg)
    if key not in value:
        msg = f"credential {credential.name} has no field {key!r}"
        raise ValueError(msg)

    field = value[key]
    return field if isinstance(field, str) else json.dumps(field, indent=2)


def render_paths(paths: list[str], *, as_json: bool = False) -> str:
    if as_json:
        return json.dumps({"paths": [{"path": path} for path in paths]}, indent=2)
    return "\n".join([PATHS_HEADER, *paths])
