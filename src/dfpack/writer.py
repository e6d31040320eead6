"""Writing schema documents and the aggregate summary, and registering build outputs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from dfpack.config import Config
from dfpack.context import ProjectInfo
from dfpack.errors import OutputWriteError
from dfpack.properties import store_properties
from dfpack.schema.types import SchemaDocument

logger = logging.getLogger(__name__)

__all__ = [
    "AggregateSummary",
    "ProjectHelper",
    "BuildOutputs",
    "schema_sub_directory",
    "write_schema_document",
    "write_summary",
]


@dataclass
class AggregateSummary:
    """Per-module summary of every data format descriptor found."""

    names: list[str]
    project: ProjectInfo

    def to_properties(self) -> dict[str, str]:
        return {
            "dataFormats": " ".join(self.names),
            "groupId": self.project.group_id,
            "artifactId": self.project.artifact_id,
            "version": self.project.version,
            "projectName": self.project.name or "",
            "projectDescription": self.project.description or "",
        }


@runtime_checkable
class ProjectHelper(Protocol):
    """Protocol for the host build's output registration hooks."""

    def add_resource(self, directory: Path, includes: list[str], excludes: list[str]) -> None:
        """Mark files under ``directory`` matching ``includes`` as build resources."""
        ...

    def attach_artifact(self, artifact_type: str, classifier: str, file: Path) -> None:
        """Attach ``file`` to the build product."""
        ...


@dataclass
class BuildOutputs:
    """Records registrations in memory, for hosts without their own hooks."""

    resources: list[tuple[Path, list[str], list[str]]] = field(default_factory=list)
    artifacts: list[tuple[str, str, Path]] = field(default_factory=list)

    def add_resource(self, directory: Path, includes: list[str], excludes: list[str]) -> None:
        self.resources.append((directory, list(includes), list(excludes)))

    def attach_artifact(self, artifact_type: str, classifier: str, file: Path) -> None:
        self.artifacts.append((artifact_type, classifier, file))


def schema_sub_directory(java_type: str) -> str:
    """Return the package of ``java_type`` as a relative path.

    ``com.example.format.Csv`` gives ``com/example/format``; a type with no
    package gives ``""``.
    """
    idx = java_type.rfind(".")
    if idx < 0:
        return ""
    return java_type[:idx].replace(".", "/")


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(path=str(path), reason=str(e), cause=e) from e


def write_schema_document(document: SchemaDocument, schema_root: Path) -> Path:
    """Write ``document`` under its package directory, replacing any previous file.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    out = schema_root / schema_sub_directory(document.model.java_type) / document.file_name
    _write_text(out, document.text)
    logger.info("Generated %s containing JSON schema for %s data format", out, document.model.name)
    return out


def write_summary(
    summary: AggregateSummary,
    summary_root: Path,
    config: Config,
    helper: ProjectHelper | None = None,
) -> Path:
    """Write the summary properties file and register it with ``helper``.

    Raises:
        OutputWriteError: If the directory or file cannot be written.
    """
    out = summary_root / config.get("summary.path") / config.get("summary.file")
    _write_text(out, store_properties(summary.to_properties(), comment=config.get("summary.comment")))

    count = len(summary.names)
    logger.info(
        "Generated %s containing %d data %s: %s",
        out,
        count,
        "formats" if count > 1 else "format",
        " ".join(summary.names),
    )

    if helper is not None:
        helper.add_resource(summary_root, list(config.get("summary.includes")), [])
        helper.attach_artifact(config.get("summary.artifact_type"), config.get("summary.classifier"), out)
    return out
