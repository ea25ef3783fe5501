"""Default resolution: direct lookup in the normalized graph."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from link_tree.exceptions import UnresolvedLinkError


def lookup_entity(type_name: str, entity_id: Any, normalized_data: Mapping[str, Any]) -> Any:
    """Return ``normalized_data[type_name][entity_id]``.

    Raises ``UnresolvedLinkError`` when the collection is missing, is not an
    id-keyed mapping, or does not contain the id.
    """
    try:
        collection = normalized_data[type_name]
    except KeyError as error:
        raise UnresolvedLinkError(type_name, entity_id, "no such collection") from error
    except TypeError as error:
        raise UnresolvedLinkError(type_name, entity_id, "type is not hashable") from error

    if not isinstance(collection, Mapping):
        reason = f"collection is a {type(collection).__name__}, not a mapping"
        raise UnresolvedLinkError(type_name, entity_id, reason)

    try:
        return collection[entity_id]
    except KeyError as error:
        raise UnresolvedLinkError(type_name, entity_id, "no such id in collection") from error
    except TypeError as error:
        raise UnresolvedLinkError(type_name, entity_id, "id is not hashable") from error
