"""
Shared pytest fixtures for uploadkit tests.

These fixtures are available to all tests in the project, including plugin tests.

Usage in plugin tests:
    # In plugins/{name}/tests/conftest.py
    from tests.conftest import *  # noqa: F401, F403

Test categories:
    - Unit tests: Mocked collaborators, real files under tmp_path
    - Listener tests: SQLAlchemy against in-memory SQLite
"""

import os
from pathlib import Path
from typing import Callable

import pytest

# Override settings BEFORE importing uploadkit modules
os.environ.setdefault("UPLOADER_APP_ENV", "testing")
os.environ.setdefault("UPLOADER_LOG_LEVEL", "WARNING")

from uploadkit.config import MappingConfig  # noqa: E402
from uploadkit.core.files import UploadedFile  # noqa: E402
from uploadkit.core.handler import FileInjector, UploadHandler  # noqa: E402
from uploadkit.core.logging import setup_logging  # noqa: E402
from uploadkit.core.mapping import MetadataReader, PropertyMappingFactory  # noqa: E402
from uploadkit.core.plugins.registry import PluginRegistry  # noqa: E402
from uploadkit.core.storage import FileSystemStorage  # noqa: E402
from tests.dummy import DummyEntity  # noqa: E402


@pytest.fixture
def entity() -> DummyEntity:
    return DummyEntity()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging(log_level="WARNING", log_format="console")


# =============================================================================
# Plugin Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_plugin_registry():
    """Reset plugin registry singleton to avoid cross-test contamination."""
    PluginRegistry._instance = None
    yield
    PluginRegistry._instance = None


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def upload_root(tmp_path: Path) -> Path:
    """Destination directory for stored files."""
    root = tmp_path / "web" / "uploads"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def mapping_config(upload_root: Path) -> MappingConfig:
    return MappingConfig(upload_destination=str(upload_root), uri_prefix="/uploads")


@pytest.fixture
def factory(mapping_config: MappingConfig) -> PropertyMappingFactory:
    return PropertyMappingFactory(MetadataReader(), {"dummy_file": mapping_config})


@pytest.fixture
def storage(factory: PropertyMappingFactory) -> FileSystemStorage:
    return FileSystemStorage(factory)


@pytest.fixture
def handler(storage: FileSystemStorage, factory: PropertyMappingFactory) -> UploadHandler:
    return UploadHandler(storage, factory, FileInjector(storage))


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def make_uploaded_file(tmp_path: Path) -> Callable[..., UploadedFile]:
    """Create a staged client upload with the given original name."""
    staging = tmp_path / "staging"
    staging.mkdir()
    counter = iter(range(1_000_000))

    def _make(original_name: str = "filename.txt", content: bytes = b"some content") -> UploadedFile:
        path = staging / f"upload_{next(counter)}.tmp"
        path.write_bytes(content)
        return UploadedFile(path, original_name=original_name, mime_type="text/plain")

    return _make


@pytest.fixture
def sample_text_file() -> bytes:
    """Return sample text file bytes."""
    return b"Hello, this is a test file content.\nLine 2.\nLine 3."
