"""dfpack - build-time schema and registry generator for data format plugins."""

from __future__ import annotations

# Pipeline
from dfpack.packager import PackagingResult, generate_dataformats

# Build context and config
from dfpack.config import Config
from dfpack.context import BuildContext, Dependency, ProjectInfo, load_build_context

# Components
from dfpack.registry import DescriptorEntry, ScanResult, scan_descriptors
from dfpack.dependencies import find_core_artifact
from dfpack.model import load_models, open_container
from dfpack.schema import PluginModel, SchemaDocument, merge_model
from dfpack.writer import AggregateSummary, BuildOutputs, ProjectHelper

# Errors
from dfpack.errors import (
    ConfigError,
    ConfigNotFoundError,
    ContainerOpenError,
    DescriptorReadError,
    ErrorCodes,
    OutputWriteError,
    PackagingError,
    ResourceReadError,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "PackagingResult",
    "generate_dataformats",
    # Build context and config
    "BuildContext",
    "Config",
    "Dependency",
    "ProjectInfo",
    "load_build_context",
    # Components
    "AggregateSummary",
    "BuildOutputs",
    "DescriptorEntry",
    "PluginModel",
    "ProjectHelper",
    "ScanResult",
    "SchemaDocument",
    "find_core_artifact",
    "load_models",
    "merge_model",
    "open_container",
    "scan_descriptors",
    # Errors
    "ConfigError",
    "ConfigNotFoundError",
    "ContainerOpenError",
    "DescriptorReadError",
    "ErrorCodes",
    "OutputWriteError",
    "PackagingError",
    "ResourceReadError",
]
