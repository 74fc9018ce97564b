"""Property mapping factory - builds mappings for owner objects."""

from typing import Any

from uploadkit.config import MappingConfig
from uploadkit.core.logging import get_logger
from uploadkit.core.mapping.metadata import MetadataReader, UploadableField
from uploadkit.core.mapping.property_mapping import PropertyMapping
from uploadkit.core.naming import (
    DirectoryNamer,
    DirectoryPrefixNamer,
    Namer,
    load_directory_namer,
    load_namer,
)

logger = get_logger(__name__)


class MappingNotFoundError(Exception):
    """No mapping configured under the requested name."""

    pass


class NotUploadableError(Exception):
    """Object's class carries no upload metadata."""

    pass


class PropertyMappingFactory:
    """
    Creates PropertyMapping instances from class metadata and mapping configuration.

    Namers are resolved once per configuration reference and shared between
    mappings; pre-built instances can be passed in `namers`.
    """

    def __init__(
        self,
        metadata: MetadataReader,
        mappings: dict[str, MappingConfig],
        namers: dict[str, Namer | DirectoryNamer] | None = None,
    ) -> None:
        self.metadata = metadata
        self.mappings = mappings
        self._namers: dict[str, Namer | DirectoryNamer] = dict(namers or {})

    def from_object(self, obj: Any) -> list[PropertyMapping]:
        """All mappings declared on the object's class."""
        cls = self._check_uploadable(obj)
        return [
            self._create_mapping(attr, field)
            for attr, field in self.metadata.get_uploadable_fields(cls).items()
        ]

    def from_name(self, obj: Any, mapping_name: str) -> PropertyMapping:
        """Mapping of the object's field configured with `mapping_name`."""
        cls = self._check_uploadable(obj)
        for attr, field in self.metadata.get_uploadable_fields(cls).items():
            if field.mapping == mapping_name:
                return self._create_mapping(attr, field)

        raise MappingNotFoundError(
            f"No field of {cls.__name__} uses mapping {mapping_name}"
        )

    def from_field(self, obj: Any, field_name: str) -> PropertyMapping | None:
        """Mapping for one uploadable attribute, None if it is not uploadable."""
        cls = self._check_uploadable(obj)
        field = self.metadata.get_uploadable_field(cls, field_name)
        if field is None:
            return None
        return self._create_mapping(field_name, field)

    def _check_uploadable(self, obj: Any) -> type:
        cls = type(obj)
        if not self.metadata.is_uploadable(cls):
            raise NotUploadableError(f"{cls.__name__} is not uploadable")
        return cls

    def _create_mapping(self, attr: str, field: UploadableField) -> PropertyMapping:
        config = self.mappings.get(field.mapping)
        if config is None:
            raise MappingNotFoundError(f"Mapping not found: {field.mapping}")

        namer = self._get_namer(config.namer, load_namer) if config.namer else None
        if config.directory_namer:
            namer = DirectoryPrefixNamer(
                self._get_namer(config.directory_namer, load_directory_namer),
                namer,
            )

        return PropertyMapping(
            name=field.mapping,
            file_property=attr,
            file_name_property=field.file_name_property,
            config=config,
            namer=namer,
        )

    def _get_namer(self, ref: str, loader: Any) -> Any:
        if ref not in self._namers:
            self._namers[ref] = loader(ref)
            logger.debug("namer_loaded", ref=ref, namer=type(self._namers[ref]).__name__)
        return self._namers[ref]
