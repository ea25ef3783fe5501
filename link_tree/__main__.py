"""Interface for ``python -m link_tree``."""

from __future__ import annotations

import json
import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ._version import version
from .denormalizer import DEFAULT_ROOT, Denormalizer
from .exceptions import LinkTreeError
from .logging_setup import setup_logging
from .resolvers import asset_path_resolver


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]

logger = logging.getLogger(__name__)


def _path_prefix(raw: str) -> tuple[str, str]:
    type_name, sep, directory = raw.partition("=")
    if not sep or not type_name or not directory:
        msg = f"expected TYPE=DIR, got {raw!r}"
        raise ArgumentTypeError(msg)
    return type_name, directory


def _load_json(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def main(args: Sequence[str] | None = None) -> None:
    """Denormalize a JSON document and print the resulting tree."""
    parser = ArgumentParser(prog="link-tree", description="Expand links in normalized JSON data into a nested tree.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file holding the normalized data (default: stdin)",
    )
    _ = parser.add_argument("-r", "--root", default=DEFAULT_ROOT, help=f"root collection (default: {DEFAULT_ROOT})")
    _ = parser.add_argument(
        "-p",
        "--path-prefix",
        metavar="TYPE=DIR",
        type=_path_prefix,
        action="append",
        default=[],
        help="resolve links of TYPE to DIR/<entity>; repeatable",
    )
    _ = parser.add_argument("--indent", type=int, default=2, help="JSON output indentation")
    _ = parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    options = parser.parse_args(args)

    setup_logging(options.log_level)

    link_resolvers = {type_name: asset_path_resolver(directory) for type_name, directory in options.path_prefix}
    denormalizer = Denormalizer(root=options.root, link_resolvers=link_resolvers)

    try:
        normalized_data = _load_json(options.input)
    except (OSError, ValueError) as error:
        parser.exit(1, f"error: cannot read normalized data: {error}\n")
    if not isinstance(normalized_data, dict):
        parser.exit(1, "error: normalized data must be a JSON object\n")

    logger.info("Loaded normalized data with collections %s", sorted(normalized_data))
    try:
        tree = denormalizer.to_tree(normalized_data)
    except (LinkTreeError, TypeError) as error:
        parser.exit(1, f"error: {error}\n")

    json.dump(tree, sys.stdout, indent=options.indent)
    _ = sys.stdout.write("\n")


if __name__ == "__main__":
    main()
