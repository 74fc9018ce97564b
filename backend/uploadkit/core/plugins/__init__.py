"""Plugin system module."""

from uploadkit.core.plugins.base import BasePlugin, PluginMetadata, PluginState
from uploadkit.core.plugins.registry import PluginRegistry, PluginLoadError

__all__ = [
    "BasePlugin",
    "PluginMetadata",
    "PluginState",
    "PluginRegistry",
    "PluginLoadError",
]
