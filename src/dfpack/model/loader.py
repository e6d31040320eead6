"""Loading data format model resources from the core artifact."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from dfpack.model.container import ResourceContainer, open_container

logger = logging.getLogger(__name__)

__all__ = ["model_resource_path", "read_models", "load_models"]


def model_resource_path(namespace: str, name: str) -> str:
    """Return the container path of the model resource for ``name``."""
    return f"{namespace.strip('/')}/{name}.json"


def read_models(container: ResourceContainer, names: Iterable[str], namespace: str) -> dict[str, str]:
    """Read the model JSON text for each name that has one, keeping ``names`` order."""
    models: dict[str, str] = {}
    for name in names:
        resource_path = model_resource_path(namespace, name)
        text = container.read_text(resource_path)
        if text is None:
            logger.debug("No model resource %s in %s", resource_path, container.artifact)
            continue
        models[name] = text
    return models


def load_models(artifact: Path, names: Iterable[str], namespace: str) -> dict[str, str]:
    """Open ``artifact``, read the model for each name, and close it again.

    Raises:
        ContainerOpenError: If the artifact cannot be opened.
        ResourceReadError: If a model resource cannot be read or decoded.
    """
    with open_container(artifact) as container:
        return read_models(container, names, namespace)
