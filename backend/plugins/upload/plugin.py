"""Upload plugin implementation."""

import os
from typing import Any

from uploadkit.config import MappingConfig, Settings, get_settings
from uploadkit.core.handler import FileInjector, UploadHandler
from uploadkit.core.helper import UploaderHelper
from uploadkit.core.listeners import register_listeners
from uploadkit.core.mapping import MetadataReader, PropertyMappingFactory
from uploadkit.core.plugins.base import BasePlugin, PluginMetadata
from uploadkit.core.storage import STORAGES, StorageInterface


class UploadPlugin(BasePlugin):
    """
    Core plugin for mapped file uploads.

    Handles:
    - Mapping configuration (application settings + plugin settings)
    - Storage, handler and helper wiring
    - ORM listener registration for uploadable models
    """

    def __init__(self, app_settings: Settings | None = None) -> None:
        super().__init__()
        self.app_settings = app_settings
        self.factory: PropertyMappingFactory | None = None
        self.storage: StorageInterface | None = None
        self.handler: UploadHandler | None = None
        self.helper: UploaderHelper | None = None

    @property
    def metadata(self) -> PluginMetadata:
        return PluginMetadata(
            name="upload",
            version="1.0.0",
            description="Mapped file uploads stored on the filesystem",
            priority=10,
            dependencies=[],
            settings_schema={
                "type": "object",
                "properties": {
                    "storage": {
                        "type": "string",
                        "enum": sorted(STORAGES),
                        "default": "file_system",
                    },
                    "mappings": {
                        "type": "object",
                        "additionalProperties": {"type": "object"},
                    },
                },
            },
        )

    async def setup(self, settings: dict[str, Any]) -> None:
        """Initialize plugin with settings."""
        self._settings = settings
        app_settings = self.app_settings = self.app_settings or get_settings()

        storage_type = settings.get("storage", app_settings.storage)
        if storage_type not in STORAGES:
            raise ValueError(f"Unknown storage: {storage_type}")

        # Plugin settings override application settings per mapping name
        mappings: dict[str, MappingConfig] = dict(app_settings.mappings)
        for name, config in settings.get("mappings", {}).items():
            mappings[name] = MappingConfig.model_validate(config)

        self.factory = PropertyMappingFactory(
            MetadataReader(),
            mappings,
            namers=settings.get("namers"),
        )
        self.storage = STORAGES[storage_type](self.factory)
        self.handler = UploadHandler(self.storage, self.factory, FileInjector(self.storage))
        self.helper = UploaderHelper(self.storage)

    def register_model(self, model: type) -> None:
        """Store/remove files of `model` along with its persistence lifecycle."""
        if self.handler is None:
            raise RuntimeError("Upload plugin is not set up")
        register_listeners(model, self.handler)

    async def healthcheck(self) -> dict[str, Any]:
        """Report mappings whose destination is not writable."""
        unwritable = [
            name
            for name, config in (self.factory.mappings if self.factory else {}).items()
            if os.path.isdir(config.upload_destination)
            and not os.access(config.upload_destination, os.W_OK)
        ]
        if unwritable:
            return {"status": "unhealthy", "unwritable_mappings": unwritable}
        return {"status": "healthy"}
