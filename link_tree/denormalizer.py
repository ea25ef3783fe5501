"""Expand links in a normalized graph into a fully nested tree."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from link_tree.exceptions import InvalidLinkError, MissingRootError, UnresolvedLinkError
from link_tree.resolvers.lookup import lookup_entity
from link_tree.tree_mapping import deep_map


if TYPE_CHECKING:
    from link_tree.resolvers.protocol import LinkResolver, ResolverTable


logger = logging.getLogger(__name__)

DEFAULT_ROOT = "composition"
TYPE_KEY = "type"
ID_KEY = "id"


class LinkKind(Enum):
    """How a mapping value found during traversal is treated."""

    NOT_A_LINK = "not_a_link"
    LINK = "link"
    INVALID_LINK = "invalid_link"


def classify(value: Mapping[Any, Any]) -> LinkKind:
    """Classify a mapping as plain data, a link, or a malformed link.

    A key holding ``None`` counts as absent.
    """
    if value.get(TYPE_KEY) is None:
        return LinkKind.NOT_A_LINK
    if value.get(ID_KEY) is None:
        return LinkKind.INVALID_LINK
    return LinkKind.LINK


class Denormalizer:
    """Turn normalized data into a tree by substituting linked entities.

    Parameters
    ----------
    root
        Key of the collection in the normalized data where traversal starts.
    link_resolvers
        Optional per-type resolvers. Types without an entry, or with ``None``,
        are resolved by looking ``data[type][id]`` up directly.
    """

    def __init__(self, root: str = DEFAULT_ROOT, link_resolvers: ResolverTable | None = None) -> None:
        super().__init__()
        if not root:
            msg = "root must not be empty"
            raise ValueError(msg)

        resolvers = dict(link_resolvers or {})
        for type_name, resolver in resolvers.items():
            if resolver is not None and not callable(resolver):
                msg = f"resolver for {type_name!r} must be callable or None, got {type(resolver).__name__}"
                raise TypeError(msg)

        self._root = root
        self._link_resolvers: Mapping[str, LinkResolver | None] = MappingProxyType(resolvers)

    @property
    def root(self) -> str:
        return self._root

    @property
    def link_resolvers(self) -> Mapping[str, LinkResolver | None]:
        return self._link_resolvers

    def to_tree(self, normalized_data: Mapping[str, Any]) -> Any:
        """Return the root collection with every link replaced by its entity.

        Resolved entities are traversed as well, so links inside them are
        expanded before this returns. Any error aborts the whole call.
        """
        try:
            seed = normalized_data[self._root]
        except KeyError as error:
            raise MissingRootError(self._root) from error

        logger.debug("Denormalizing from root %r", self._root)

        def rewrite_entry(key: Hashable, value: Any) -> tuple[Hashable, Any]:
            if not isinstance(value, Mapping):
                return key, value

            kind = classify(value)
            if kind is LinkKind.NOT_A_LINK:
                return key, value
            if kind is LinkKind.INVALID_LINK:
                raise InvalidLinkError(value)
            return key, self.resolve_link(value[TYPE_KEY], value[ID_KEY], normalized_data)

        return deep_map(seed, rewrite_entry)

    def resolve_link(self, type_name: str, entity_id: Any, normalized_data: Mapping[str, Any]) -> Any:
        """Resolve one link with the registered resolver or the default lookup."""
        try:
            resolver = self._link_resolvers.get(type_name)
        except TypeError as error:
            raise UnresolvedLinkError(type_name, entity_id, "type is not hashable") from error
        if resolver is not None:
            logger.debug("Resolving %r/%r with custom resolver", type_name, entity_id)
            return resolver(type_name, entity_id, normalized_data)

        logger.debug("Resolving %r/%r by lookup", type_name, entity_id)
        return lookup_entity(type_name, entity_id, normalized_data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root={self._root!r}, link_resolvers={sorted(self._link_resolvers)!r})"
