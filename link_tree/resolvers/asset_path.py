"""Resolver that maps asset links to file paths under a directory."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .lookup import lookup_entity
from .protocol import LinkResolver


def asset_path_resolver(directory: str, sep: str = "/") -> LinkResolver:
    """Build a resolver returning ``<directory><sep><file name>`` for each link.

    The file name is looked up in the graph the same way as the default
    resolution, so ``{"type": "assets", "id": "logo"}`` with
    ``{"assets": {"logo": "logo.png"}}`` resolves to ``"<directory>/logo.png"``.
    """
    if not directory:
        msg = "directory must not be empty"
        raise ValueError(msg)
    if not sep:
        msg = "sep must not be empty"
        raise ValueError(msg)

    def resolve(type_name: str, entity_id: Any, normalized_data: Mapping[str, Any], /) -> str:
        file_name = lookup_entity(type_name, entity_id, normalized_data)
        if not isinstance(file_name, str):
            msg = f"asset {type_name!r}/{entity_id!r} must be a file name string, got {type(file_name).__name__}"
            raise TypeError(msg)
        return f"{directory}{sep}{file_name}"

    return resolve
