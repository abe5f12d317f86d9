"""Logic for deep merging configuration dictionaries."""

from typing import Any

# Mappings under these keys name whole sets of files; a user value replaces
# the default set instead of extending it.
REPLACED_KEYS = frozenset({"resources", "common"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively, except for ``REPLACED_KEYS``.
    - Scalars and arrays in 'update' replace 'base' values.
    """
    result = base.copy()
    for key, value in update.items():
        if (
            key not in REPLACED_KEYS
            and isinstance(result.get(key), dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
