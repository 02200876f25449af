"""Abstract storage backend."""

from abc import ABC, abstractmethod
from pathlib import Path

from docstore.schemas.file_stats import FileStats
from docstore.storage.content_types import content_type
from docstore.storage.keys import generate_key


class StorageBackend(ABC):
    """Interface for file storage addressed by generated keys."""

    @abstractmethod
    async def store(self, content: bytes, original_filename: str) -> str:
        """
        Store bytes under a freshly generated key and return that key.
        The key is what callers persist to reference the file later.
        """
        ...

    @abstractmethod
    async def resolve_path(self, key: str) -> Path:
        """Absolute path of the stored file. Raises NotFound if it does not exist."""
        ...

    @abstractmethod
    async def fetch_bytes(self, key: str) -> bytes:
        """Read the full content of the file stored at key."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove file at key. Deleting a missing key succeeds."""
        ...

    @abstractmethod
    async def rename(self, old_key: str, new_filename: str) -> str:
        """Move the file to a new key minted from new_filename and return it."""
        ...

    @abstractmethod
    async def list_keys(self) -> list[str]:
        """Keys of every stored file, in no particular order."""
        ...

    @abstractmethod
    async def stat(self, key: str) -> FileStats:
        """Size and timestamps of the stored file, without reading its content."""
        ...

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """True when a file is stored under key."""
        ...

    def generate_key(self, original_filename: str) -> str:
        """Build storage key: {timestamp}-{token}-{safe name}{ext} to avoid collisions."""
        return generate_key(original_filename)

    def content_type(self, key: str) -> str:
        """MIME type for serving the file, from the key's extension."""
        return content_type(key)
