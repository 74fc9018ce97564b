"""Plugin registry - central store for all loaded plugins."""

import logging
from typing import Any

from uploadkit.core.plugins.base import BasePlugin, PluginState

logger = logging.getLogger(__name__)


class PluginLoadError(Exception):
    """Error loading a plugin."""

    pass


class PluginRegistry:
    """
    Central registry for plugins.
    Singleton - one instance per application.
    """

    _instance: "PluginRegistry | None" = None

    def __new__(cls) -> "PluginRegistry":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._plugins: dict[str, BasePlugin] = {}
        return cls._instance

    @property
    def plugins(self) -> dict[str, BasePlugin]:
        """Get copy of plugins dict."""
        return self._plugins.copy()

    def register(self, plugin: BasePlugin) -> None:
        """Register a plugin."""
        name = plugin.metadata.name

        if name in self._plugins:
            raise ValueError(f"Plugin {name} already registered")

        self._plugins[name] = plugin

    def unregister(self, name: str) -> None:
        """Unregister a plugin."""
        self._plugins.pop(name, None)

    def get(self, name: str) -> BasePlugin | None:
        """Get plugin by name."""
        return self._plugins.get(name)

    def get_active_plugins(self) -> list[BasePlugin]:
        """Get active plugins sorted by priority (lower first)."""
        return sorted(
            (p for p in self._plugins.values() if p.state == PluginState.ACTIVE),
            key=lambda p: p.metadata.priority,
        )

    async def load(self, plugin: BasePlugin, settings: dict[str, Any]) -> BasePlugin:
        """Set up a plugin and register it as active."""
        name = plugin.metadata.name

        for dep in plugin.metadata.dependencies:
            if dep not in self._plugins:
                raise PluginLoadError(f"Plugin {name} depends on unknown plugin: {dep}")

        plugin._state = PluginState.LOADING
        try:
            await plugin.setup(settings)
            plugin._state = PluginState.ACTIVE
        except Exception as e:
            plugin._state = PluginState.ERROR
            raise PluginLoadError(f"Plugin {name} setup failed: {e}") from e

        self.register(plugin)
        logger.info(f"Loaded plugin: {name}")
        return plugin

    async def shutdown(self) -> None:
        """Call shutdown hooks of active plugins."""
        for plugin in self.get_active_plugins():
            await plugin.on_shutdown()
            plugin._state = PluginState.DISABLED
