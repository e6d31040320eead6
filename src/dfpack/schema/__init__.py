"""Schema merge engine: model rows, properties extraction and document assembly."""

from __future__ import annotations

from dfpack.schema.merge import (
    PROPERTIES_MARKER,
    build_plugin_model,
    build_schema_document,
    extract_properties,
    merge_model,
    resolve_label,
)
from dfpack.schema.rows import parse_json_schema, scan_json_rows
from dfpack.schema.types import PluginModel, SchemaDocument

__all__ = [
    "PROPERTIES_MARKER",
    "PluginModel",
    "SchemaDocument",
    "build_plugin_model",
    "build_schema_document",
    "extract_properties",
    "merge_model",
    "parse_json_schema",
    "resolve_label",
    "scan_json_rows",
]
