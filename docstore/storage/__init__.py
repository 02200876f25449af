# Storage backend

from docstore.config import UPLOAD_DIR
from docstore.storage.base import StorageBackend
from docstore.storage.content_types import content_type
from docstore.storage.errors import (
    DeleteFailed,
    InvalidKey,
    NotFound,
    ReadFailed,
    RenameFailed,
    StorageError,
    StorageUnavailable,
)
from docstore.storage.keys import generate_key
from docstore.storage.local_storage import LocalStorage

storage: StorageBackend = LocalStorage(UPLOAD_DIR)

__all__ = [
    "storage",
    "StorageBackend",
    "LocalStorage",
    "generate_key",
    "content_type",
    "StorageError",
    "StorageUnavailable",
    "InvalidKey",
    "NotFound",
    "ReadFailed",
    "DeleteFailed",
    "RenameFailed",
]
