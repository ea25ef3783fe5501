"""Pre-order key/value rewriting over nested mappings and sequences."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any


Rewrite = Callable[[Hashable, Any], tuple[Hashable, Any]]


def deep_map(value: Any, rewrite: Rewrite) -> Any:
    """Rebuild ``value`` with ``rewrite`` applied to every mapping entry.

    The tree is traversed pre-order: ``rewrite`` sees each ``(key, value)`` pair
    before its contents, and the recursion continues into the value it returns.
    Mappings come back as ``dict``, lists and tuples keep their type, anything
    else is returned as-is.

    Example (double every integer leaf under a key)::

        >>> deep_map({"a": {"b": 1}, "c": [{"d": 2}]}, lambda k, v: (k, v * 2 if isinstance(v, int) else v))
        {'a': {'b': 2}, 'c': [{'d': 4}]}

    Example (stringify keys)::

        >>> deep_map({1: "x"}, lambda k, v: (str(k), v))
        {'1': 'x'}
    """
    if isinstance(value, Mapping):
        rebuilt: dict[Hashable, Any] = {}
        for key, item in value.items():
            new_key, new_item = rewrite(key, item)
            rebuilt[new_key] = deep_map(new_item, rewrite)
        return rebuilt
    if isinstance(value, list):
        return [deep_map(item, rewrite) for item in value]
    if isinstance(value, tuple):
        return tuple(deep_map(item, rewrite) for item in value)
    return value
