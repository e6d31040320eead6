"""Data format descriptor discovery.

Usage::

    from dfpack.registry import scan_descriptors

    result = scan_descriptors([Path("src/main/resources")], base_dir, registry_path)
    result.names        # discovery order
    result.java_types   # name -> implementation type
"""

from __future__ import annotations

from dfpack.registry.scanner import iter_descriptors, read_descriptor, scan_descriptors
from dfpack.registry.types import DescriptorEntry, ScanResult

__all__ = [
    "DescriptorEntry",
    "ScanResult",
    "iter_descriptors",
    "read_descriptor",
    "scan_descriptors",
]
