"""Upload mapping module."""

from uploadkit.core.mapping.metadata import MetadataReader, UploadableField, uploadable
from uploadkit.core.mapping.property_mapping import (
    IncompatibleFile,
    NoFile,
    PendingFile,
    PendingUpload,
    PropertyMapping,
)
from uploadkit.core.mapping.factory import (
    MappingNotFoundError,
    NotUploadableError,
    PropertyMappingFactory,
)

__all__ = [
    "MetadataReader",
    "UploadableField",
    "uploadable",
    "IncompatibleFile",
    "NoFile",
    "PendingFile",
    "PendingUpload",
    "PropertyMapping",
    "MappingNotFoundError",
    "NotUploadableError",
    "PropertyMappingFactory",
]
