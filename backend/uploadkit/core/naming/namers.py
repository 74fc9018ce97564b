"""Built-in naming strategies."""

from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

from uploadkit.core.files import UploadedFile
from uploadkit.core.naming.base import DirectoryNamer, Namer

if TYPE_CHECKING:
    from uploadkit.core.mapping.property_mapping import PropertyMapping


def _uploaded_file(obj: Any, mapping: "PropertyMapping") -> UploadedFile:
    from uploadkit.core.mapping.property_mapping import PendingUpload

    pending = mapping.get_file(obj)
    if not isinstance(pending, PendingUpload):
        raise ValueError(f"No pending upload for mapping {mapping.name}")
    return pending.file


class UniqidNamer(Namer):
    """Random unique name keeping the original extension: "3f2a...9c.jpg"."""

    def name(self, obj: Any, mapping: "PropertyMapping") -> str:
        file = _uploaded_file(obj, mapping)
        return f"{uuid4().hex}{Path(file.client_original_name).suffix}"


class OrignameNamer(Namer):
    """Unique prefix plus the client file name: "3f2a...9c_photo.jpg"."""

    def name(self, obj: Any, mapping: "PropertyMapping") -> str:
        file = _uploaded_file(obj, mapping)
        return f"{uuid4().hex}_{file.client_original_name}"


class DatePathNamer(Namer):
    """Date-sharded unique name: "2024/05/31/3f2a...9c.jpg"."""

    def name(self, obj: Any, mapping: "PropertyMapping") -> str:
        file = _uploaded_file(obj, mapping)
        now = datetime.now(timezone.utc)
        file_ext = Path(file.client_original_name).suffix
        return f"{now.year}/{now.month:02d}/{now.day:02d}/{uuid4().hex}{file_ext}"


class PropertyDirectoryNamer(DirectoryNamer):
    """Uses an owner attribute as directory, e.g. the owner id."""

    def __init__(self, property_name: str) -> None:
        if not property_name:
            raise ValueError("PropertyDirectoryNamer requires a property name")
        self.property_name = property_name

    def directory_name(self, obj: Any, mapping: "PropertyMapping") -> str:
        value = getattr(obj, self.property_name, None)
        return "" if value is None else str(value)


class DirectoryPrefixNamer(Namer):
    """
    Prefixes the name of `namer` with the directory of `directory_namer`.

    The directory becomes part of the stored name ("42/3f2a...9c.jpg"), so
    the recorded name alone locates the file below the upload destination.
    Without `namer` the client file name is used.
    """

    def __init__(self, directory_namer: DirectoryNamer, namer: Namer | None = None) -> None:
        self.directory_namer = directory_namer
        self.namer = namer

    def name(self, obj: Any, mapping: "PropertyMapping") -> str:
        if self.namer is not None:
            name = self.namer.name(obj, mapping)
        else:
            name = _uploaded_file(obj, mapping).client_original_name

        directory = self.directory_namer.directory_name(obj, mapping)
        directory = directory.replace("\\", "/").strip("/")
        return f"{directory}/{name}" if directory else name
