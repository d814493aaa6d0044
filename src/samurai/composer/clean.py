"""Merge a generated composer.json with project values and strip volatile/empty entries.

Cleaning drops the top-level "version" and "time" keys (set by the bootstrap
package, meaningless for the new project), then walks the tree: mappings are
cleaned first and dropped when nothing survives; other values are dropped when
empty or falsy, otherwise kept as they are.
"""

from __future__ import annotations

from typing import Any

from samurai.helpers import is_empty

VOLATILE_KEYS = ("version", "time")


def merge_config(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Shallow merge: override keys replace base keys in place; new keys are appended."""
    merged = dict(base)
    merged.update(overrides)
    return merged


def _filter_value(value: Any) -> Any:
    if isinstance(value, dict):
        return _filter_mapping(value)
    return value


def _filter_mapping(mapping: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in mapping.items():
        filtered = _filter_value(value)
        if not is_empty(filtered):
            result[key] = filtered
    return result


def clean_config(config: dict[str, Any]) -> dict[str, Any]:
    """Return a copy without top-level version/time and without empty values at any depth."""
    top = {k: v for k, v in config.items() if k not in VOLATILE_KEYS}
    return _filter_mapping(top)
