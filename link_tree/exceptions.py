"""Errors raised while turning a normalized graph into a tree."""

from __future__ import annotations

from typing import Any


class LinkTreeError(Exception):
    """Base class for all link-tree errors."""


class InvalidLinkError(LinkTreeError, ValueError):
    """A mapping carries a ``type`` but no ``id``."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid link: {value!r} has a 'type' key but no 'id'")


class UnresolvedLinkError(LinkTreeError, LookupError):
    """A link points at a collection or id that is not in the graph."""

    def __init__(self, type_name: Any, entity_id: Any, reason: str) -> None:
        self.type_name = type_name
        self.entity_id = entity_id
        super().__init__(f"Cannot resolve link {type_name!r}/{entity_id!r}: {reason}")


class MissingRootError(LinkTreeError, LookupError):
    """The configured root collection is absent from the graph."""

    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"root key not found in normalized data: {root!r}")
