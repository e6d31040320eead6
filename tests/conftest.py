"""Shared test fixtures for the dfpack test suite."""

from __future__ import annotations

import zipfile
from pathlib import Path
from typing import Callable

import pytest

from dfpack.context import BuildContext, Dependency, ProjectInfo


REGISTRY_PATH = "META-INF/services/org/apache/camel/dataformat"
MODEL_NAMESPACE = "org/apache/camel/model/dataformat"


# === Model resources ===

CSV_MODEL = """\
{
  "model": {
    "kind": "model",
    "name": "csv",
    "title": "CSV",
    "description": "The CSV data format is used for handling CSV payloads.",
    "javaType": "org.apache.camel.model.dataformat.CsvDataFormat",
    "label": "CSV",
    "input": false,
    "output": false
  },
  "properties": {
    "delimiter": { "kind": "attribute", "required": "false", "type": "string", "javaType": "java.lang.String", "deprecated": "false", "description": "The column delimiter" },
    "quoteMode": { "kind": "attribute", "required": "false", "type": "string", "javaType": "org.apache.commons.csv.QuoteMode", "enum": [ "ALL", "MINIMAL" ], "deprecated": "false" }
  }
}
"""

UNLABELLED_MODEL = """\
{
  "model": {
    "kind": "model",
    "name": "json",
    "title": "JSon"
  },
  "properties": {
    "prettyPrint": { "kind": "attribute", "required": "false", "type": "boolean", "javaType": "java.lang.Boolean", "deprecated": "false", "defaultValue": "false" }
  }
}
"""


# === Fixtures ===


@pytest.fixture
def project() -> ProjectInfo:
    """Identity of the module being packaged."""
    return ProjectInfo(
        group_id="org.acme",
        artifact_id="acme-dataformats",
        version="1.2.3",
        name="Acme :: Data Formats",
        description="Acme data formats",
    )


@pytest.fixture
def write_descriptor() -> Callable[..., Path]:
    """Return a helper writing a descriptor file below ``root``'s registry directory."""

    def _write(root: Path, name: str, text: str) -> Path:
        registry = root / REGISTRY_PATH
        registry.mkdir(parents=True, exist_ok=True)
        path = registry / name
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def make_core_jar(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper building a core jar holding the given name -> model text resources."""

    def _make(models: dict[str, str], file_name: str = "camel-core.jar") -> Path:
        jar = tmp_path / "repo" / file_name
        jar.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(jar, "w") as zf:
            zf.writestr("META-INF/MANIFEST.MF", "Manifest-Version: 1.0\n")
            for name, text in models.items():
                zf.writestr(f"{MODEL_NAMESPACE}/{name}.json", text)
        return jar

    return _make


@pytest.fixture
def make_context(tmp_path: Path, project: ProjectInfo) -> Callable[..., BuildContext]:
    """Return a helper building a BuildContext rooted at ``tmp_path/module``."""

    def _make(
        resource_dirs: list[str] | None = None,
        core: Path | None = None,
        transitive: bool = False,
    ) -> BuildContext:
        deps: list[Dependency] = []
        if core is not None:
            deps.append(Dependency(group_id="org.apache.camel", artifact_id="camel-core", version="2.16.0", file=core))
        return BuildContext(
            base_dir=tmp_path / "module",
            resource_dirs=[Path(d) for d in (resource_dirs or ["src/main/resources"])],
            project=project,
            dependencies=[] if transitive else deps,
            transitive_dependencies=deps if transitive else [],
        )

    return _make


@pytest.fixture
def csv_model() -> str:
    """Core model text for the csv data format, with a label."""
    return CSV_MODEL


@pytest.fixture
def unlabelled_model() -> str:
    """Core model text without a label entry."""
    return UNLABELLED_MODEL
