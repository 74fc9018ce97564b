"""Template/API helper for public file URIs."""

from typing import Any

from uploadkit.core.storage.base import StorageInterface


class UploaderHelper:
    """Resolves public asset URIs for uploadable objects."""

    def __init__(self, storage: StorageInterface) -> None:
        self.storage = storage

    def asset(self, obj: Any, mapping_name: str) -> str | None:
        return self.storage.resolve_uri(obj, mapping_name)
