"""Merging a core data format model with descriptor metadata into a schema document."""

from __future__ import annotations

import json
import logging

from dfpack.context import ProjectInfo
from dfpack.schema.rows import parse_json_schema, scan_json_rows
from dfpack.schema.types import PluginModel, SchemaDocument

logger = logging.getLogger(__name__)

__all__ = [
    "PROPERTIES_MARKER",
    "resolve_label",
    "extract_properties",
    "build_plugin_model",
    "build_schema_document",
    "merge_model",
]

PROPERTIES_MARKER = '"properties": {'

_EMPTY_PROPERTIES = "\n  }\n}\n"


def resolve_label(rows: list[dict[str, str]]) -> str:
    """Return the value of the first row with a ``label`` key, or ``""``."""
    for row in rows:
        if "label" in row:
            return row["label"]
    logger.debug("No label row in model")
    return ""


def extract_properties(json_text: str, marker: str = PROPERTIES_MARKER) -> str:
    """Return the text following the first occurrence of ``marker``.

    The result is the body of the properties object up to the end of the
    model text, closing braces included. Returns ``""`` if the marker is absent.
    """
    idx = json_text.find(marker)
    if idx < 0:
        return ""
    if json_text.count(marker) > 1:
        logger.warning("Properties marker %r occurs more than once, using the first occurrence", marker)
    return json_text[idx + len(marker) :]


def build_plugin_model(name: str, java_type: str, project: ProjectInfo, rows: list[dict[str, str]]) -> PluginModel:
    return PluginModel(
        name=name,
        description=project.description or "",
        label=resolve_label(rows),
        java_type=java_type,
        group_id=project.group_id,
        artifact_id=project.artifact_id,
        version=project.version,
    )


def build_schema_document(model: PluginModel, properties: str) -> str:
    """Compose the schema JSON text.

    Metadata values are inserted as-is. ``properties`` must be a fragment as
    returned by :func:`extract_properties`; when it is empty the properties
    object is closed here.
    """
    if not properties.strip():
        properties = _EMPTY_PROPERTIES
    parts = [
        "{",
        '\n  "dataformat": {',
        f'\n    "name": "{model.name}",',
        f'\n    "description": "{model.description}",',
        f'\n    "label": "{model.label}",',
        f'\n    "javaType": "{model.java_type}",',
        f'\n    "groupId": "{model.group_id}",',
        f'\n    "artifactId": "{model.artifact_id}",',
        f'\n    "version": "{model.version}"',
        "\n  },",
        "\n  " + PROPERTIES_MARKER,
        properties,
    ]
    return "".join(parts)


def merge_model(
    name: str,
    model_text: str,
    java_type: str,
    project: ProjectInfo,
    marker: str = PROPERTIES_MARKER,
) -> SchemaDocument:
    """Build the schema document for one data format from its core model text.

    Model text that is not JSON is read line by line for the label instead, up to
    the properties marker; the properties fragment is extracted either way.
    """
    try:
        rows = parse_json_schema("model", model_text, parse_properties=False)
    except json.JSONDecodeError as e:
        logger.warning("Model for %s data format is not valid JSON (%s), reading it line by line", name, e)
        idx = model_text.find(marker)
        rows = scan_json_rows(model_text if idx < 0 else model_text[:idx])

    model = build_plugin_model(name, java_type, project, rows)
    logger.debug("Model %s", model)

    text = build_schema_document(model, extract_properties(model_text, marker))
    logger.debug("JSON schema\n%s", text)
    return SchemaDocument(model=model, text=text)
