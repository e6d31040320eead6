"""Scanner for data format descriptor files under resource roots."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from dfpack.errors import DescriptorReadError
from dfpack.properties import parse_properties
from dfpack.registry.types import DescriptorEntry, ScanResult

logger = logging.getLogger(__name__)

__all__ = ["read_descriptor", "iter_descriptors", "scan_descriptors"]


def read_descriptor(path: Path) -> DescriptorEntry:
    """Read and parse one descriptor file.

    Raises:
        DescriptorReadError: If the file cannot be read or decoded.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DescriptorReadError(path=str(path), reason=str(e), cause=e) from e
    return DescriptorEntry(name=path.name, path=path, raw_text=text, fields=parse_properties(text))


def iter_descriptors(
    resource_dirs: list[Path],
    base_dir: Path,
    registry_path: str,
) -> Iterator[DescriptorEntry]:
    """Yield a DescriptorEntry for every non-hidden file in each root's registry directory.

    Roots are visited in the given order and files within a root by name.
    A root without the registry directory is skipped.
    """
    for resource_dir in resource_dirs:
        root = resource_dir if resource_dir.is_absolute() else base_dir / resource_dir
        registry_dir = root / registry_path
        if not registry_dir.is_dir():
            logger.debug("No %s directory in %s, skipping", registry_path, root)
            continue

        try:
            entries = sorted(os.scandir(registry_dir), key=lambda e: e.name)
        except OSError as e:
            raise DescriptorReadError(path=str(registry_dir), reason=str(e), cause=e) from e

        for entry in entries:
            if entry.name.startswith("."):
                continue
            if not entry.is_file():
                continue
            yield read_descriptor(Path(entry.path))


def scan_descriptors(
    resource_dirs: list[Path],
    base_dir: Path,
    registry_path: str,
) -> ScanResult:
    """Collect descriptor names and the name -> implementation type index."""
    result = ScanResult()
    for entry in iter_descriptors(resource_dirs, base_dir, registry_path):
        result.names.append(entry.name)
        java_type = entry.java_type
        if java_type:
            result.java_types[entry.name] = java_type
        else:
            logger.debug("Descriptor %s declares no class, no schema will be generated for it", entry.path)

    if not result.names:
        logger.debug(
            "No descriptors found in any %s directory. Are you sure you have created a data format?",
            registry_path,
        )
    return result
