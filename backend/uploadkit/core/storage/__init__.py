"""Storage module."""

from uploadkit.core.storage.base import StorageInterface
from uploadkit.core.storage.filesystem import FileSystemStorage

STORAGES: dict[str, type[StorageInterface]] = {
    "file_system": FileSystemStorage,
}

__all__ = ["StorageInterface", "FileSystemStorage", "STORAGES"]
