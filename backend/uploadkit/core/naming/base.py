"""Naming strategy interfaces."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from uploadkit.core.mapping.property_mapping import PropertyMapping


class Namer(ABC):
    """Computes the stored file name for an upload."""

    @abstractmethod
    def name(self, obj: Any, mapping: "PropertyMapping") -> str:
        """
        Return the file name to store the pending upload under.
        The name may contain "/"-separated sub-directories.
        """
        ...


class DirectoryNamer(ABC):
    """Computes the sub-directory (relative to the destination) for an owner."""

    @abstractmethod
    def directory_name(self, obj: Any, mapping: "PropertyMapping") -> str:
        ...
