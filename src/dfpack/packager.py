"""The scan, resolve, merge and emit pipeline for one packaging run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from dfpack.config import Config
from dfpack.context import BuildContext
from dfpack.dependencies import find_core_artifact
from dfpack.model.loader import load_models
from dfpack.registry.scanner import scan_descriptors
from dfpack.schema.merge import merge_model
from dfpack.writer import AggregateSummary, ProjectHelper, write_schema_document, write_summary

logger = logging.getLogger(__name__)

__all__ = ["PackagingResult", "generate_dataformats"]


@dataclass
class PackagingResult:
    """What one run discovered and wrote."""

    names: list[str] = field(default_factory=list)
    java_types: dict[str, str] = field(default_factory=dict)
    core_artifact: Path | None = None
    schema_files: list[Path] = field(default_factory=list)
    summary_file: Path | None = None

    @property
    def count(self) -> int:
        return len(self.names)


def generate_dataformats(
    context: BuildContext,
    config: Config | None = None,
    helper: ProjectHelper | None = None,
) -> PackagingResult:
    """Discover data format descriptors, generate their schemas, and write the summary.

    Every call rescans from scratch; no state is kept between calls.

    Args:
        context: The host build's resource roots, dependencies and identity.
        config: Packaging settings; defaults apply when omitted.
        helper: Receives the summary file registration, if given.

    Raises:
        DescriptorReadError: If a descriptor file cannot be read.
        ContainerOpenError: If the core artifact cannot be opened or read.
        ResourceReadError: If a core model resource cannot be read or decoded.
        OutputWriteError: If an output directory or file cannot be written.
    """
    if config is None:
        config = Config()

    scan = scan_descriptors(context.resource_dirs, context.base_dir, config.get("registry.path"))
    result = PackagingResult(names=list(scan.names), java_types=dict(scan.java_types))

    core = find_core_artifact(context, config.get("core.group_id"), config.get("core.artifact_id"))
    if core is not None and core.file is not None and scan.java_types:
        artifact = context.resolve(core.file)
        result.core_artifact = artifact
        models = load_models(artifact, scan.java_types, config.get("model.namespace"))
        schema_root = context.schema_root
        for name, model_text in models.items():
            document = merge_model(
                name,
                model_text,
                scan.java_types[name],
                context.project,
                marker=config.get("model.properties_marker"),
            )
            result.schema_files.append(write_schema_document(document, schema_root))

    if scan.count > 0:
        summary = AggregateSummary(names=list(scan.names), project=context.project)
        result.summary_file = write_summary(summary, context.summary_root, config, helper)
    else:
        logger.debug("No data formats discovered, no summary written")

    return result
