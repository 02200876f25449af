"""Local filesystem storage."""

import logging
from datetime import datetime, timezone
from pathlib import Path

import aiofiles
import aiofiles.os

from docstore.config import UPLOAD_DIR
from docstore.schemas.file_stats import FileStats
from docstore.storage.base import StorageBackend
from docstore.storage.errors import (
    DeleteFailed,
    InvalidKey,
    NotFound,
    ReadFailed,
    RenameFailed,
    StorageUnavailable,
)
from docstore.storage.keys import is_safe_key

logger = logging.getLogger(__name__)


def _utc(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class LocalStorage(StorageBackend):
    """Store files flat in one directory. Keys are file names directly under root."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root if root is not None else UPLOAD_DIR).resolve()

    def _path(self, key: str) -> Path:
        """Path for a caller-supplied key; rejects anything but a single segment."""
        if not is_safe_key(key):
            raise InvalidKey(key)
        return self.root / key

    async def ensure_storage_root(self) -> None:
        """Create the root directory and missing parents if absent."""
        if await aiofiles.os.path.isdir(self.root):
            return
        try:
            # exist_ok covers a concurrent caller creating it first
            await aiofiles.os.makedirs(self.root, exist_ok=True)
        except OSError as e:
            logger.error("Could not create upload directory %s: %s", self.root, e)
            raise StorageUnavailable(self.root, str(e)) from e
        logger.info("Created upload directory: %s", self.root)

    async def store(self, content: bytes, original_filename: str) -> str:
        await self.ensure_storage_root()
        key = self.generate_key(original_filename)
        path = self.root / key
        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except (OSError, ValueError) as e:
            logger.error("Error writing %s to local storage: %s", key, e)
            raise StorageUnavailable(self.root, str(e)) from e
        logger.info("File stored: %s (%d bytes)", key, len(content))
        return key

    async def resolve_path(self, key: str) -> Path:
        path = self._path(key)
        if not await aiofiles.os.path.isfile(path):
            logger.warning("File not found: %s", key)
            raise NotFound(key)
        return path

    async def exists(self, key: str) -> bool:
        return await aiofiles.os.path.isfile(self._path(key))

    async def fetch_bytes(self, key: str) -> bytes:
        path = await self.resolve_path(key)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            # Removed between the existence check and the read
            raise NotFound(key) from e
        except OSError as e:
            logger.error("Error reading %s from local storage: %s", key, e)
            raise ReadFailed(key, str(e)) from e

    async def delete(self, key: str) -> None:
        path = self._path(key)
        if not await aiofiles.os.path.exists(path):
            logger.info("File not found, skipping deletion: %s", key)
            return
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            logger.info("File already removed: %s", key)
            return
        except OSError as e:
            logger.error("Error deleting %s from local storage: %s", key, e)
            raise DeleteFailed(key, str(e)) from e
        logger.info("File deleted: %s", key)

    async def rename(self, old_key: str, new_filename: str) -> str:
        """
        Logical rename: the file moves to a brand-new key (new timestamp and
        token) built from new_filename. Callers must persist the returned key.
        """
        old_path = await self.resolve_path(old_key)
        new_key = self.generate_key(new_filename)
        try:
            await aiofiles.os.rename(old_path, self.root / new_key)
        except FileNotFoundError as e:
            raise NotFound(old_key) from e
        except (OSError, ValueError) as e:
            logger.error("Error renaming %s in local storage: %s", old_key, e)
            raise RenameFailed(old_key, str(e)) from e
        logger.info("File renamed: %s -> %s", old_key, new_key)
        return new_key

    async def list_keys(self) -> list[str]:
        await self.ensure_storage_root()
        try:
            return await aiofiles.os.listdir(self.root)
        except OSError as e:
            logger.error("Error listing files in %s: %s", self.root, e)
            raise StorageUnavailable(self.root, str(e)) from e

    async def stat(self, key: str) -> FileStats:
        path = await self.resolve_path(key)
        try:
            st = await aiofiles.os.stat(path)
        except FileNotFoundError as e:
            raise NotFound(key) from e
        except OSError as e:
            logger.error("Error reading stats for %s: %s", key, e)
            raise ReadFailed(key, str(e)) from e
        # st_birthtime is missing on most Linux builds; ctime is the fallback
        created = getattr(st, "st_birthtime", None) or st.st_ctime
        return FileStats(
            size=st.st_size,
            createdAt=_utc(created),
            modifiedAt=_utc(st.st_mtime),
        )
