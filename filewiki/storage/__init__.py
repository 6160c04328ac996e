from functools import lru_cache

from filewiki.core.config import get_settings
from filewiki.storage.base import (
    MARKDOWN,
    Commit, Document,
    DocumentNotFound, StorageError,
    PageStorage,
)
from filewiki.storage.filesystem import FileStorage
from filewiki.storage.memory import MemoryStorage


@lru_cache
def get_storage() -> PageStorage:
    """FastAPI dependency: the process-wide storage backend."""
    settings = get_settings()
    if settings.storage_backend == "memory":
        return MemoryStorage()
    return FileStorage(settings.storage_root)


__all__ = [
    "MARKDOWN",
    "Commit", "Document",
    "DocumentNotFound", "StorageError",
    "PageStorage",
    "FileStorage", "MemoryStorage",
    "get_storage",
]
