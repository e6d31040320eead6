"""Registry types: DescriptorEntry, ScanResult."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

__all__ = [
    "DescriptorEntry",
    "ScanResult",
]


@dataclass(frozen=True)
class DescriptorEntry:
    """A data format descriptor file as found in a registry directory."""

    name: str
    path: Path
    raw_text: str
    fields: dict[str, str] = field(default_factory=dict)

    @property
    def java_type(self) -> str | None:
        """The implementation's fully-qualified type name, if declared."""
        return self.fields.get("class")


@dataclass
class ScanResult:
    """Outcome of scanning all resource roots.

    ``names`` keeps discovery order and one element per descriptor file;
    ``java_types`` maps each name to its implementation type name and omits
    descriptors that declare no ``class``.
    """

    names: list[str] = field(default_factory=list)
    java_types: dict[str, str] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.names)
