"""Uploader bootstrap."""

from typing import Any

from uploadkit.config import Settings, get_settings
from uploadkit.core.logging import get_logger, setup_logging
from uploadkit.core.plugins.registry import PluginRegistry


async def bootstrap(
    settings: Settings | None = None,
    plugin_settings: dict[str, Any] | None = None,
) -> PluginRegistry:
    """
    Configure logging and activate the upload plugin.

    Returns the plugin registry; the upload services are reachable through
    `registry.get("upload")`.
    """
    from plugins.upload.plugin import UploadPlugin

    settings = settings or get_settings()

    # Initialize structured logging FIRST
    setup_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
        is_development=settings.is_development,
    )

    logger = get_logger(__name__)
    logger.info("uploader_starting", app_name=settings.app_name, environment=settings.app_env)

    registry = PluginRegistry()
    plugin = registry.get("upload")
    if plugin is None:
        await registry.load(UploadPlugin(settings), plugin_settings or {})
    elif plugin.app_settings != settings or plugin.settings != (plugin_settings or {}):
        # The registry is process-wide; the first configuration stays in effect
        logger.warning(
            "uploader_already_bootstrapped",
            mappings=sorted(plugin.factory.mappings),
            ignored_mappings=sorted(settings.mappings),
        )

    logger.info(
        "uploader_started",
        plugins_loaded=len(registry.get_active_plugins()),
        mappings=sorted(registry.get("upload").factory.mappings),
    )
    return registry
