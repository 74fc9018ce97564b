"""Local filesystem storage."""

import os
from typing import Any

from uploadkit.core.logging import get_logger
from uploadkit.core.mapping.factory import PropertyMappingFactory
from uploadkit.core.mapping.property_mapping import PendingUpload, PropertyMapping
from uploadkit.core.storage.base import StorageInterface

logger = get_logger(__name__)

# Directory segment separating filesystem storage from public URLs
PUBLIC_ROOT = "web"


class FileSystemStorage(StorageInterface):
    """
    Stores uploads on the local filesystem.

    Locations are recomputed from the mapping on every call; nothing about
    stored files is cached here.
    """

    def __init__(self, factory: PropertyMappingFactory) -> None:
        self.factory = factory

    def upload(self, obj: Any, mapping: PropertyMapping) -> str | None:
        pending = mapping.get_file(obj)
        if not isinstance(pending, PendingUpload):
            logger.debug(
                "upload_skipped",
                mapping=mapping.name,
                reason=type(pending).__name__,
            )
            return None

        file = pending.file
        if mapping.has_namer():
            name = mapping.namer.name(obj, mapping)
        else:
            name = file.client_original_name

        directory = mapping.upload_destination + os.sep + (mapping.get_upload_dir(obj) or "")

        # Names may carry their own sub-directories ("2024/05/photo.jpg")
        sub_dir, _, file_name = name.replace("\\", "/").rpartition("/")
        sub_dir = sub_dir.strip("/")
        if not file_name:
            raise ValueError(f"Empty file name computed for mapping {mapping.name}")
        if sub_dir:
            directory = os.path.join(directory, sub_dir.replace("/", os.sep))
        if not self._is_within(directory, mapping.upload_destination):
            raise ValueError(
                f"Upload directory {directory} escapes the destination of mapping {mapping.name}"
            )

        file.move(directory, file_name)

        logger.info(
            "file_moved",
            mapping=mapping.name,
            directory=directory,
            file_name=file_name,
        )
        return f"{sub_dir}/{file_name}" if sub_dir else file_name

    def remove(self, obj: Any, mapping: PropertyMapping) -> bool:
        name = mapping.get_file_name(obj)
        if not name:
            return False

        path = mapping.upload_destination + os.sep + name
        if not os.path.exists(path):
            logger.debug("remove_skipped_missing_file", mapping=mapping.name, path=path)
            return False

        os.remove(path)
        logger.info("file_removed", mapping=mapping.name, path=path)
        return True

    def resolve_path(self, obj: Any, mapping: PropertyMapping | str) -> str | None:
        mapping = self._get_mapping(obj, mapping)

        name = mapping.get_file_name(obj)
        if not name:
            return None

        # upload_dir is not applied here: the destination is the stored root
        return mapping.upload_destination + os.sep + name

    def resolve_uri(self, obj: Any, mapping: PropertyMapping | str) -> str | None:
        mapping = self._get_mapping(obj, mapping)

        name = mapping.get_file_name(obj)
        if not name:
            return None

        uri_prefix = (mapping.uri_prefix or "").rstrip("/")
        sub_path = self._public_sub_path(mapping.get_upload_dir(obj) or "", uri_prefix)

        parts = [uri_prefix]
        if sub_path:
            parts.append(sub_path)
        parts.append(name.replace("\\", "/").lstrip("/"))
        return "/".join(parts)

    def _get_mapping(self, obj: Any, mapping: PropertyMapping | str) -> PropertyMapping:
        if isinstance(mapping, str):
            return self.factory.from_name(obj, mapping)
        return mapping

    @staticmethod
    def _is_within(directory: str, root: str) -> bool:
        directory = os.path.realpath(directory)
        root = os.path.realpath(root)
        return os.path.commonpath([directory, root]) == root

    @staticmethod
    def _public_sub_path(upload_dir: str, uri_prefix: str) -> str:
        """
        Part of `upload_dir` below the public root and the URI prefix.

        "/abs/path/web/project/web/uploads/custom/dir" with prefix "/uploads"
        gives "custom/dir". The rightmost "web" segment wins.
        """
        segments = [s for s in upload_dir.replace("\\", "/").split("/") if s]

        if PUBLIC_ROOT in segments:
            last = len(segments) - 1 - segments[::-1].index(PUBLIC_ROOT)
            segments = segments[last + 1:]

        prefix = [s for s in uri_prefix.split("/") if s]
        if prefix and segments[: len(prefix)] == prefix:
            segments = segments[len(prefix):]

        return "/".join(segments)
