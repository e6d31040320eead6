"""Build context: everything the packager consumes from its host build."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dfpack.config import Config
from dfpack.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["ProjectInfo", "Dependency", "BuildContext", "load_build_context"]


class ProjectInfo(BaseModel):
    """Identity metadata of the module being packaged."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str
    name: str | None = None
    description: str | None = None


class Dependency(BaseModel):
    """One resolved dependency of the module being packaged."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str | None = None
    file: Path | None = None

    def matches(self, group_id: str, artifact_id: str) -> bool:
        return self.group_id == group_id and self.artifact_id == artifact_id


class BuildContext(BaseModel):
    """Explicit configuration structure for one packaging run."""

    base_dir: Path
    resource_dirs: list[Path] = Field(default_factory=list)
    out_dir: Path | None = None
    schema_out_dir: Path | None = None
    project: ProjectInfo
    dependencies: list[Dependency] = Field(default_factory=list)
    transitive_dependencies: list[Dependency] = Field(default_factory=list)

    def resolve(self, path: Path) -> Path:
        """Resolve ``path`` against the base directory unless it is absolute."""
        if path.is_absolute():
            return path
        return self.base_dir / path

    @property
    def summary_root(self) -> Path:
        if self.out_dir is not None:
            return self.resolve(self.out_dir)
        return self.base_dir / "target" / "generated" / "camel" / "dataformats"

    @property
    def schema_root(self) -> Path:
        if self.schema_out_dir is not None:
            return self.resolve(self.schema_out_dir)
        return self.base_dir / "target" / "classes"


def load_build_context(path: str | Path) -> tuple[BuildContext, Config]:
    """Load a build context and its config overrides from a YAML file.

    Relative ``base_dir`` values are taken relative to the YAML file's directory.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        ConfigError: If the YAML is invalid or does not describe a build context.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigNotFoundError(config_path=str(path))

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in build context: {path}", cause=e) from e

    if not isinstance(parsed, dict):
        raise ConfigError(message=f"Build context must be a YAML mapping: {path}")

    overrides: dict[str, Any] = parsed.pop("config", None) or {}
    if not isinstance(overrides, dict):
        raise ConfigError(message=f"'config' must be a mapping in build context: {path}")

    base_dir = Path(parsed.get("base_dir", "."))
    if not base_dir.is_absolute():
        parsed["base_dir"] = (path.parent / base_dir).resolve()

    try:
        context = BuildContext.model_validate(parsed)
    except ValidationError as e:
        raise ConfigError(message=f"Invalid build context in {path}: {e}", cause=e) from e

    logger.debug("Loaded build context for %s:%s from %s", context.project.group_id, context.project.artifact_id, path)
    return context, Config(overrides)
