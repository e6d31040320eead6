"""Schema type definitions: PluginModel, SchemaDocument."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["PluginModel", "SchemaDocument"]


@dataclass(frozen=True)
class PluginModel:
    """Descriptor metadata enriched with the module's identity."""

    name: str
    description: str
    label: str
    java_type: str
    group_id: str
    artifact_id: str
    version: str


@dataclass(frozen=True)
class SchemaDocument:
    """The JSON text generated for one data format, with the model it was built from."""

    model: PluginModel
    text: str

    @property
    def file_name(self) -> str:
        return f"{self.model.name}.json"
