"""Typed storage failures."""

from pathlib import Path


class StorageError(Exception):
    """Base class for every failure raised by a storage backend."""


class StorageUnavailable(StorageError):
    """The storage root cannot be created, read or written."""

    def __init__(self, root: Path | str, reason: str = "") -> None:
        self.root = str(root)
        message = f"Storage unavailable: {self.root}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidKey(StorageError, ValueError):
    """A key that is not a single safe path segment."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Invalid storage key: {key!r}")


class NotFound(StorageError):
    """No stored file exists for the key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"File not found: {key}")


class _KeyOperationError(StorageError):
    operation = ""

    def __init__(self, key: str, reason: str = "") -> None:
        self.key = key
        message = f"File {self.operation} failed: {key}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ReadFailed(_KeyOperationError):
    """The file exists but could not be read."""

    operation = "read"


class DeleteFailed(_KeyOperationError):
    """The file exists but could not be removed."""

    operation = "deletion"


class RenameFailed(_KeyOperationError):
    """The file could not be moved to its new key."""

    operation = "rename"
