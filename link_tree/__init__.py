"""link-tree - expand normalized, id-linked data into nested trees"""

from ._version import version as __version__
from .denormalizer import DEFAULT_ROOT, Denormalizer, LinkKind, classify
from .exceptions import InvalidLinkError, LinkTreeError, MissingRootError, UnresolvedLinkError
from .resolvers import LinkResolver, ResolverTable, asset_path_resolver, lookup_entity
from .tree_mapping import Rewrite, deep_map


__all__ = [
    "DEFAULT_ROOT",
    "Denormalizer",
    "InvalidLinkError",
    "LinkKind",
    "LinkResolver",
    "LinkTreeError",
    "MissingRootError",
    "ResolverTable",
    "Rewrite",
    "UnresolvedLinkError",
    "__version__",
    "asset_path_resolver",
    "classify",
    "deep_map",
    "lookup_entity",
]
