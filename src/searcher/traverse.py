"""Safe lookups into loosely-typed JSON documents returned by the GHES APIs."""

from __future__ import annotations

from typing import Any, Optional, Union

PathKey = Union[str, int]


def dig(document: Any, *path: PathKey, default: Any = None) -> Any:
    """Follow `path` through nested dicts/lists, returning `default` on any miss.

    String keys only apply to dicts and integer keys only to lists or tuples.
    A missing key, wrong node type, out-of-range index or null value at any
    depth yields `default`; this function never raises.
    """
    node = document
    for key in path:
        if node is None:
            return default
        if isinstance(key, str):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        elif isinstance(key, int) and not isinstance(key, bool):
            if not isinstance(node, (list, tuple)) or not -len(node) <= key < len(node):
                return default
            node = node[key]
        else:
            return default
    return default if node is None else node


def dig_text(document: Any, *path: PathKey) -> Optional[str]:
    """Return the non-empty string at `path`, else None."""
    value = dig(document, *path)
    if isinstance(value, str) and value.strip():
        return value
    return None


__all__ = ["PathKey", "dig", "dig_text"]
