"""Flattening a JSON schema group into rows of string key/value pairs."""

from __future__ import annotations

import json
import re
from typing import Any

__all__ = ["parse_json_schema", "scan_json_rows"]

_STRING_MEMBER = re.compile(r'^\s*"([^"\\]+)"\s*:\s*"((?:[^"\\]|\\.)*)"\s*,?\s*$')


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, list):
        return ",".join(_stringify(v) for v in value)
    return json.dumps(value)


def parse_json_schema(group: str, json_text: str, parse_properties: bool = False) -> list[dict[str, str]]:
    """Parse ``json_text`` and flatten the top-level ``group`` object into rows.

    With ``parse_properties`` false each key of the group becomes its own
    single-entry row. With it true each key is treated as a property name and
    its object value becomes one row, with the property name under ``name``.
    A missing or non-object group yields no rows.

    Control characters inside strings are accepted.

    Raises:
        json.JSONDecodeError: If ``json_text`` is not JSON even with that allowance.
    """
    data = json.loads(json_text, strict=False)
    if not isinstance(data, dict):
        return []
    section = data.get(group)
    if not isinstance(section, dict):
        return []

    rows: list[dict[str, str]] = []
    for key, value in section.items():
        if not parse_properties:
            rows.append({key: _stringify(value)})
            continue
        row = {"name": key}
        if isinstance(value, dict):
            for attr, attr_value in value.items():
                row[attr] = _stringify(attr_value)
        rows.append(row)
    return rows


def scan_json_rows(json_text: str) -> list[dict[str, str]]:
    """Collect a row for every line holding a single ``"key": "string"`` member.

    A line-oriented reading for model text that ``json.loads`` rejects, such as
    text with trailing commas. Values are returned as written, escapes included.
    """
    rows: list[dict[str, str]] = []
    for line in json_text.splitlines():
        match = _STRING_MEMBER.match(line)
        if match:
            rows.append({match.group(1): match.group(2)})
    return rows
