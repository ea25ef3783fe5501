"""Resolver interface definitions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class LinkResolver(Protocol):
    """Callable that turns a ``(type, id)`` link into an entity."""

    def __call__(self, type_name: str, entity_id: Any, normalized_data: Mapping[str, Any], /) -> Any:
        """Return the entity for the link. Must not mutate ``normalized_data``."""
        ...


# A ``None`` entry means "use the default table lookup" for that type.
ResolverTable = Mapping[str, LinkResolver | None]
