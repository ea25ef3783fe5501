"""Link resolver contracts and implementations."""

from .asset_path import asset_path_resolver
from .lookup import lookup_entity
from .protocol import LinkResolver, ResolverTable


__all__ = ["LinkResolver", "ResolverTable", "asset_path_resolver", "lookup_entity"]
