"""Error hierarchy for the dfpack packager."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "PackagingError",
    "ConfigNotFoundError",
    "ConfigError",
    "DescriptorReadError",
    "ContainerOpenError",
    "ResourceReadError",
    "OutputWriteError",
    "ErrorCodes",
]


class PackagingError(Exception):
    """Base error for all dfpack errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(PackagingError):
    """Raised when a build context file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(PackagingError):
    """Raised when a build context is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DescriptorReadError(PackagingError):
    """Raised when a discovered descriptor file cannot be read."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DESCRIPTOR_READ_ERROR",
            message=f"Failed to read file {path}. Reason: {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The descriptor file that could not be read."""
        return self.details["path"]


class ContainerOpenError(PackagingError):
    """Raised when the core artifact cannot be opened as a resource container."""

    def __init__(self, artifact_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONTAINER_OPEN_ERROR",
            message=f"Error loading data format model from {artifact_path}. Reason: {reason}",
            details={"artifact_path": artifact_path, "reason": reason},
            **kwargs,
        )

    @property
    def artifact_path(self) -> str:
        """The artifact file that failed to open."""
        return self.details["artifact_path"]


class ResourceReadError(PackagingError):
    """Raised when a resource inside an opened container cannot be read or decoded."""

    def __init__(self, artifact_path: str, resource_path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="RESOURCE_READ_ERROR",
            message=f"Failed to read resource {resource_path} from {artifact_path}. Reason: {reason}",
            details={"artifact_path": artifact_path, "resource_path": resource_path, "reason": reason},
            **kwargs,
        )

    @property
    def artifact_path(self) -> str:
        """The artifact holding the resource."""
        return self.details["artifact_path"]

    @property
    def resource_path(self) -> str:
        """The resource that could not be read."""
        return self.details["resource_path"]


class OutputWriteError(PackagingError):
    """Raised when a generated file or its directory cannot be written."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="OUTPUT_WRITE_ERROR",
            message=f"Failed to write {path}. Reason: {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The output path that could not be written."""
        return self.details["path"]


class ErrorCodes:
    """All packager error codes as constants.

    Example:
        if error.code == ErrorCodes.CONTAINER_OPEN_ERROR:
            report_corrupt_artifact()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    DESCRIPTOR_READ_ERROR = "DESCRIPTOR_READ_ERROR"
    CONTAINER_OPEN_ERROR = "CONTAINER_OPEN_ERROR"
    RESOURCE_READ_ERROR = "RESOURCE_READ_ERROR"
    OUTPUT_WRITE_ERROR = "OUTPUT_WRITE_ERROR"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
