"""Property mapping - per-field upload configuration bound to an owner attribute."""

from dataclasses import dataclass
from typing import Any

from uploadkit.config import MappingConfig
from uploadkit.core.files import UploadedFile
from uploadkit.core.naming.base import Namer


@dataclass(frozen=True)
class NoFile:
    """The file attribute is empty."""


@dataclass(frozen=True)
class IncompatibleFile:
    """The file attribute holds something that is not a client upload."""

    value: Any


@dataclass(frozen=True)
class PendingUpload:
    """The file attribute holds an upload waiting to be stored."""

    file: UploadedFile


PendingFile = NoFile | IncompatibleFile | PendingUpload


class PropertyMapping:
    """
    Binds a mapping configuration to one uploadable attribute of an owner class.

    Reads and writes the owner's file and file-name attributes; everything
    else comes from the mapping configuration.
    """

    def __init__(
        self,
        name: str,
        file_property: str,
        file_name_property: str,
        config: MappingConfig,
        namer: Namer | None = None,
    ) -> None:
        self.name = name
        self.file_property = file_property
        self.file_name_property = file_name_property
        self.config = config
        self._namer = namer

    # === FILE ===

    def get_file(self, obj: Any) -> PendingFile:
        value = getattr(obj, self.file_property, None)
        if value is None:
            return NoFile()
        if isinstance(value, UploadedFile):
            return PendingUpload(value)
        return IncompatibleFile(value)

    def set_file(self, obj: Any, value: Any) -> None:
        setattr(obj, self.file_property, value)

    def get_file_name(self, obj: Any) -> str | None:
        return getattr(obj, self.file_name_property, None)

    def set_file_name(self, obj: Any, name: str | None) -> None:
        setattr(obj, self.file_name_property, name)

    # === NAMING ===

    def has_namer(self) -> bool:
        return self._namer is not None

    @property
    def namer(self) -> Namer | None:
        return self._namer

    def get_upload_dir(self, obj: Any) -> str:
        """
        Sub-directory below the upload destination for this owner.

        Always empty: directory namers prefix the stored name instead, so the
        recorded file name is enough to find the file again.
        """
        return ""

    # === CONFIGURATION ===

    @property
    def upload_destination(self) -> str:
        return self.config.upload_destination

    @property
    def uri_prefix(self) -> str:
        return self.config.uri_prefix

    @property
    def delete_on_remove(self) -> bool:
        return self.config.delete_on_remove

    @property
    def delete_on_update(self) -> bool:
        return self.config.delete_on_update

    @property
    def inject_on_load(self) -> bool:
        return self.config.inject_on_load

    def __repr__(self) -> str:
        return f"PropertyMapping({self.name!r}, file_property={self.file_property!r})"
