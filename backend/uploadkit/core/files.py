"""File handles: plain files on disk and client uploads staged on disk."""

import os
import shutil
import tempfile
from pathlib import Path

from fastapi import UploadFile


class FileException(OSError):
    """Error moving a file into place."""

    pass


class File:
    """A file on the local filesystem."""

    def __init__(self, path: str | Path, check_path: bool = True) -> None:
        if check_path and not os.path.isfile(path):
            raise FileNotFoundError(f"The file \"{path}\" does not exist")
        self._path = str(path)

    @property
    def path(self) -> str:
        return self._path

    @property
    def filename(self) -> str:
        return os.path.basename(self._path)

    @property
    def extension(self) -> str:
        return Path(self._path).suffix.lstrip(".")

    def exists(self) -> bool:
        return os.path.isfile(self._path)

    def move(self, directory: str, name: str | None = None) -> "File":
        """Move the file to `directory` under `name` and return the moved file."""
        target = self._get_target_file(directory, name)

        try:
            shutil.move(self._path, target)
        except OSError as e:
            raise FileException(
                f"Could not move the file \"{self._path}\" to \"{target}\" ({e})"
            ) from e

        return File(target, check_path=False)

    def _get_target_file(self, directory: str, name: str | None) -> str:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise FileException(f"Unable to create the \"{directory}\" directory ({e})") from e

        if not os.access(directory, os.W_OK):
            raise FileException(f"Unable to write in the \"{directory}\" directory")

        return os.path.join(directory, os.path.basename(name or self.filename))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._path!r})"


class UploadedFile(File):
    """
    A file uploaded by a client, staged in a temporary location.

    Only instances of this class are picked up by the storage; a plain
    `File` pointing at an already stored file is never uploaded again.
    """

    def __init__(
        self,
        path: str | Path,
        original_name: str,
        mime_type: str | None = None,
        check_path: bool = True,
    ) -> None:
        super().__init__(path, check_path=check_path)
        # Clients may send full paths (old browsers, Windows)
        self._original_name = original_name.replace("\\", "/").rsplit("/", 1)[-1]
        self._mime_type = mime_type or "application/octet-stream"
        self._moved = False

    @property
    def client_original_name(self) -> str:
        return self._original_name

    @property
    def client_original_extension(self) -> str:
        return Path(self._original_name).suffix.lstrip(".")

    @property
    def client_mime_type(self) -> str:
        return self._mime_type

    def move(self, directory: str, name: str | None = None) -> File:
        if self._moved:
            raise FileException(f"The file \"{self._original_name}\" has already been moved")

        moved = super().move(directory, name or self._original_name)
        self._moved = True
        return moved

    @classmethod
    async def from_upload_file(
        cls,
        upload: UploadFile,
        tmp_dir: str | None = None,
        chunk_size: int = 1024 * 1024,
    ) -> "UploadedFile":
        """Stage a FastAPI upload on disk so it can be moved by the storage."""
        fd, tmp_path = tempfile.mkstemp(prefix="upload_", dir=tmp_dir)
        with os.fdopen(fd, "wb") as out:
            while True:
                chunk = await upload.read(chunk_size)
                if not chunk:
                    break
                out.write(chunk)

        return cls(
            tmp_path,
            original_name=upload.filename or os.path.basename(tmp_path),
            mime_type=upload.content_type,
        )
