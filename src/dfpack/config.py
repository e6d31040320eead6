"""Configuration accessor with packaging defaults."""

from __future__ import annotations

import copy
from typing import Any

__all__ = ["Config", "DEFAULTS"]

DEFAULTS: dict[str, Any] = {
    "registry": {
        "path": "META-INF/services/org/apache/camel/dataformat",
    },
    "core": {
        "group_id": "org.apache.camel",
        "artifact_id": "camel-core",
    },
    "model": {
        "namespace": "org/apache/camel/model/dataformat",
        "properties_marker": '"properties": {',
    },
    "summary": {
        "path": "META-INF/services/org/apache/camel",
        "file": "dataformat.properties",
        "comment": "Generated by dfpack",
        "includes": ["**/dataformat.properties"],
        "artifact_type": "properties",
        "classifier": "camelDataFormat",
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration accessor with dot-path key support.

    Values not supplied in ``data`` fall back to :data:`DEFAULTS`.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _deep_merge(DEFAULTS, data or {})

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current
