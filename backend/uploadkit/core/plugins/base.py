"""Plugin contract for services loaded into the uploader registry."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class PluginState(str, Enum):
    """Where a plugin is in its load/shutdown cycle."""

    DISABLED = "disabled"  # Not loaded yet, or shut down
    LOADING = "loading"
    ACTIVE = "active"
    ERROR = "error"  # setup() raised


@dataclass
class PluginMetadata:
    """Identity and settings contract of a plugin."""

    name: str  # Registry key, e.g. "upload"
    version: str
    description: str = ""
    priority: int = 100  # Lower loads and lists first
    dependencies: list[str] = field(default_factory=list)
    settings_schema: dict | None = None  # JSON Schema of the setup() settings


class BasePlugin(ABC):
    """
    A unit of uploader services wired from settings.

    Subclasses describe themselves through `metadata` and build their services
    in `setup()`. The registry owns state transitions.
    """

    def __init__(self) -> None:
        self._state = PluginState.DISABLED
        self._settings: dict[str, Any] = {}

    @property
    @abstractmethod
    def metadata(self) -> PluginMetadata:
        ...

    @abstractmethod
    async def setup(self, settings: dict[str, Any]) -> None:
        """Build services from `settings`; raising leaves the plugin in ERROR."""
        ...

    async def on_shutdown(self) -> None:
        pass

    async def healthcheck(self) -> dict[str, Any]:
        return {"status": "healthy"}

    @property
    def state(self) -> PluginState:
        return self._state

    @property
    def name(self) -> str:
        return self.metadata.name

    @property
    def settings(self) -> dict[str, Any]:
        return self._settings
