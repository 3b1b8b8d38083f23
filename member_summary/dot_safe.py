"""Utility for making type names safe for use in paths."""

import re

# Conservative: keep letters, digits, underscore, dash.
DOT_SAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")
TYPE_ARGS_RE = re.compile(r"<[^<>]*>")


def dot_safe(name: str) -> str:
    """Make a stable filename-ish token.

    Nested types (Outer.Inner or Outer$Inner) become Outer-Inner and type
    arguments are dropped: Map<K, V> -> Map.
    """
    prev = None
    while prev != name:
        prev, name = name, TYPE_ARGS_RE.sub("", name)
    name = name.replace("$", "-").replace(".", "-")
    name = DOT_SAFE_RE.sub("-", name).strip("-")
    return name or "Unknown"
