"""Upload handler - applies the storage to every mapping of an object."""

from typing import Any

from uploadkit.core.files import File
from uploadkit.core.logging import get_logger
from uploadkit.core.mapping.factory import PropertyMappingFactory
from uploadkit.core.mapping.property_mapping import PendingUpload, PropertyMapping
from uploadkit.core.storage.base import StorageInterface

logger = get_logger(__name__)


class FileInjector:
    """Puts a plain File for the stored file back on the owner."""

    def __init__(self, storage: StorageInterface) -> None:
        self.storage = storage

    def inject_file(self, obj: Any, mapping: PropertyMapping) -> None:
        path = self.storage.resolve_path(obj, mapping)
        mapping.set_file(obj, File(path, check_path=False) if path else None)


class UploadHandler:
    """
    Entry point for persistence lifecycle hooks.

    Each mapping is processed independently: a failure on one mapping does
    not undo work already done for another.
    """

    def __init__(
        self,
        storage: StorageInterface,
        factory: PropertyMappingFactory,
        injector: FileInjector,
    ) -> None:
        self.storage = storage
        self.factory = factory
        self.injector = injector

    def upload(self, obj: Any) -> None:
        """Store pending uploads and record their names on the object."""
        for mapping in self.factory.from_object(obj):
            name = self.storage.upload(obj, mapping)
            if name is None:
                continue

            mapping.set_file_name(obj, name)
            # The upload handle is consumed; expose the stored file instead
            self.injector.inject_file(obj, mapping)

    def clean(self, obj: Any) -> None:
        """Delete files about to be replaced by a pending upload."""
        for mapping in self.factory.from_object(obj):
            if not mapping.delete_on_update:
                continue
            if not isinstance(mapping.get_file(obj), PendingUpload):
                continue
            if self.storage.remove(obj, mapping):
                logger.info("replaced_file_removed", mapping=mapping.name)

    def remove(self, obj: Any) -> None:
        """Delete stored files of an object being removed."""
        for mapping in self.factory.from_object(obj):
            if mapping.delete_on_remove:
                self.storage.remove(obj, mapping)

    def inject(self, obj: Any) -> None:
        """Expose stored files on a freshly loaded object."""
        for mapping in self.factory.from_object(obj):
            if mapping.inject_on_load:
                self.injector.inject_file(obj, mapping)
