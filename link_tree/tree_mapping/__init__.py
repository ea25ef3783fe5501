"""Generic recursive rewriting of nested structures."""

from .mapper import Rewrite, deep_map


__all__ = ["Rewrite", "deep_map"]
