"""Pretty-print a JSON-like tree while filtering out selected keys."""

import json
from collections.abc import Iterable, Mapping
from typing import Any

DEFAULT_INDENT = 1


def pretty_print(tree: Any) -> str:
    """Render ``tree`` as indented JSON without skipping any key."""
    return print_json(tree)


def print_json(
    tree: Any,
    *skipped_keys: str,
    sort: bool = False,
    indent: int = DEFAULT_INDENT,
) -> str:
    """Render ``tree`` as indented JSON, dropping ``skipped_keys`` everywhere.

    Keys keep their natural order unless ``sort`` is set.
    """
    filtered = filter_tree(tree, skipped_keys)
    return json.dumps(filtered, indent=indent, sort_keys=sort, ensure_ascii=False)


def filter_tree(tree: Any, skipped_keys: Iterable[str]) -> Any:
    """Return a copy of ``tree`` without the given keys at any nesting level."""
    skipped = set(skipped_keys)
    return _filter(tree, skipped)


def _filter(node: Any, skipped: set[str]) -> Any:
    if isinstance(node, Mapping):
        return {
            key: _filter(value, skipped)
            for key, value in node.items()
            if key is not None and key not in skipped
        }
    if isinstance(node, (list, tuple)):
        return [_filter(item, skipped) for item in node]
    return node
