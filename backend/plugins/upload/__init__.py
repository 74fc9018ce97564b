"""Upload plugin."""

from plugins.upload.plugin import UploadPlugin

__all__ = ["UploadPlugin"]
