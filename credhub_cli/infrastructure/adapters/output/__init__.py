"""Output renderers for the command line."""

from .formatter import credential_to_dict, render_json, render_paths, render_text, select_key, to_plain

__all__ = [
    "credential_to_dict",
    "render_json",
    "render_paths",
    "render_text",
    "select_key",
    "to_plain",
]
