"""Logic for deep merging configuration dictionaries."""

from typing import Any

# List-valued keys whose entries accumulate instead of being replaced.
ADDITIVE_KEYS = frozenset({"getter_prefixes", "setter_prefixes"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists in 'update' replace lists in 'base', except for ADDITIVE_KEYS,
      which keep base order and append new entries.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
