"""Read-only resource containers over a packaged artifact."""

from __future__ import annotations

import logging
import zipfile
from abc import ABC, abstractmethod
from pathlib import Path
from types import TracebackType

from dfpack.errors import ContainerOpenError, ResourceReadError

logger = logging.getLogger(__name__)

__all__ = ["ResourceContainer", "ArchiveContainer", "DirectoryContainer", "open_container"]


class ResourceContainer(ABC):
    """Named, read-only resources inside an artifact.

    Resource paths use ``/`` separators regardless of platform. Containers are
    context managers and must not be used after they are closed.
    """

    def __init__(self, artifact: Path) -> None:
        self.artifact = artifact

    @abstractmethod
    def read_bytes(self, resource_path: str) -> bytes | None:
        """Return the resource's bytes, or None if there is no such resource."""

    def read_text(self, resource_path: str, encoding: str = "utf-8") -> str | None:
        data = self.read_bytes(resource_path)
        if data is None:
            return None
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise ResourceReadError(
                artifact_path=str(self.artifact),
                resource_path=resource_path,
                reason=f"not valid {encoding}: {e}",
                cause=e,
            ) from e

    def close(self) -> None:
        pass

    def __enter__(self) -> ResourceContainer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ArchiveContainer(ResourceContainer):
    """A jar or zip archive."""

    def __init__(self, artifact: Path) -> None:
        super().__init__(artifact)
        try:
            self._zip = zipfile.ZipFile(artifact, mode="r")
        except (OSError, zipfile.BadZipFile) as e:
            raise ContainerOpenError(artifact_path=str(artifact), reason=str(e), cause=e) from e

    def read_bytes(self, resource_path: str) -> bytes | None:
        try:
            info = self._zip.getinfo(resource_path)
        except KeyError:
            return None
        try:
            return self._zip.read(info)
        except (OSError, zipfile.BadZipFile) as e:
            raise ResourceReadError(
                artifact_path=str(self.artifact),
                resource_path=resource_path,
                reason=str(e),
                cause=e,
            ) from e

    def close(self) -> None:
        self._zip.close()


class DirectoryContainer(ResourceContainer):
    """An exploded output directory such as a sibling module's compiled classes."""

    def __init__(self, artifact: Path) -> None:
        super().__init__(artifact)
        self._root = artifact.resolve()

    def read_bytes(self, resource_path: str) -> bytes | None:
        target = (self._root / resource_path).resolve()
        if not target.is_relative_to(self._root) or not target.is_file():
            return None
        try:
            return target.read_bytes()
        except OSError as e:
            raise ResourceReadError(
                artifact_path=str(self.artifact),
                resource_path=resource_path,
                reason=str(e),
                cause=e,
            ) from e


def open_container(artifact: Path) -> ResourceContainer:
    """Open ``artifact`` as a read-only resource container.

    Directories are read in place; anything else must be a zip archive.

    Raises:
        ContainerOpenError: If the artifact is missing or not a readable archive.
    """
    artifact = Path(artifact)
    if artifact.is_dir():
        logger.debug("Opening %s as a directory container", artifact)
        return DirectoryContainer(artifact)
    if not artifact.exists():
        raise ContainerOpenError(artifact_path=str(artifact), reason="file does not exist")
    logger.debug("Opening %s as an archive container", artifact)
    return ArchiveContainer(artifact)
