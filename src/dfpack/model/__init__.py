"""Read-only access to the core module's data format models."""

from __future__ import annotations

from dfpack.model.container import ArchiveContainer, DirectoryContainer, ResourceContainer, open_container
from dfpack.model.loader import load_models, model_resource_path, read_models

__all__ = [
    "ArchiveContainer",
    "DirectoryContainer",
    "ResourceContainer",
    "load_models",
    "model_resource_path",
    "open_container",
    "read_models",
]
