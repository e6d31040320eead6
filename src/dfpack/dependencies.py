"""Locating the core module among the build's resolved dependencies."""

from __future__ import annotations

import logging
from typing import Iterable

from dfpack.context import BuildContext, Dependency

logger = logging.getLogger(__name__)

__all__ = ["find_dependency", "find_core_artifact"]


def find_dependency(dependencies: Iterable[Dependency], group_id: str, artifact_id: str) -> Dependency | None:
    """Return the first dependency with the given coordinates, or None."""
    for dep in dependencies:
        if dep.matches(group_id, artifact_id):
            return dep
    return None


def find_core_artifact(context: BuildContext, group_id: str, artifact_id: str) -> Dependency | None:
    """Find the core module, checking direct dependencies before transitive ones.

    Returns None when the module is absent or has no resolved file.
    """
    dep = find_dependency(context.dependencies, group_id, artifact_id)
    if dep is None:
        dep = find_dependency(context.transitive_dependencies, group_id, artifact_id)
    if dep is None:
        logger.debug("No %s:%s dependency found, skipping schema generation", group_id, artifact_id)
        return None
    if dep.file is None:
        logger.debug("Dependency %s:%s has no resolved file, skipping schema generation", group_id, artifact_id)
        return None
    return dep
