"""Storage interface."""

from abc import ABC, abstractmethod
from typing import Any

from uploadkit.core.mapping.property_mapping import PropertyMapping


class StorageInterface(ABC):
    """Stores, removes and locates the files of uploadable objects."""

    @abstractmethod
    def upload(self, obj: Any, mapping: PropertyMapping) -> str | None:
        """
        Store the pending upload of `mapping`.
        Returns the stored file name, or None when nothing was uploaded.
        """
        ...

    @abstractmethod
    def remove(self, obj: Any, mapping: PropertyMapping) -> bool:
        """Delete the stored file. Returns True if a file was deleted."""
        ...

    @abstractmethod
    def resolve_path(self, obj: Any, mapping: PropertyMapping | str) -> str | None:
        """Absolute filesystem path of the stored file."""
        ...

    @abstractmethod
    def resolve_uri(self, obj: Any, mapping: PropertyMapping | str) -> str | None:
        """Public URI of the stored file."""
        ...
