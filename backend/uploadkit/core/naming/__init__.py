"""Naming strategies and lookup by configuration reference."""

import importlib
from typing import Any

from uploadkit.core.naming.base import DirectoryNamer, Namer
from uploadkit.core.naming.namers import (
    DatePathNamer,
    DirectoryPrefixNamer,
    OrignameNamer,
    PropertyDirectoryNamer,
    UniqidNamer,
)

NAMERS: dict[str, type[Namer]] = {
    "uniqid": UniqidNamer,
    "origname": OrignameNamer,
    "date_path": DatePathNamer,
}

DIRECTORY_NAMERS: dict[str, type[DirectoryNamer]] = {
    "property": PropertyDirectoryNamer,
}


class NamerNotFoundError(Exception):
    """Configured namer cannot be resolved."""

    pass


def _import_ref(ref: str) -> Any:
    """Import "package.module:attr"."""
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise NamerNotFoundError(f"Unknown namer: {ref}")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise NamerNotFoundError(f"Cannot import namer {ref}: {e}") from e


def _instantiate(ref: str, base: type) -> Any:
    target = _import_ref(ref)
    if isinstance(target, type):
        if not issubclass(target, base):
            raise NamerNotFoundError(f"{ref} is not a {base.__name__}")
        return target()
    if not isinstance(target, base):
        raise NamerNotFoundError(f"{ref} is not a {base.__name__}")
    return target


def load_namer(ref: str) -> Namer:
    """Resolve a namer id ("uniqid") or import reference to an instance."""
    if ref in NAMERS:
        return NAMERS[ref]()
    return _instantiate(ref, Namer)


def load_directory_namer(ref: str) -> DirectoryNamer:
    """Resolve "property:<attr>" or an import reference to an instance."""
    kind, _, arg = ref.partition(":")
    if kind in DIRECTORY_NAMERS:
        return DIRECTORY_NAMERS[kind](arg)
    return _instantiate(ref, DirectoryNamer)


__all__ = [
    "Namer",
    "DirectoryNamer",
    "UniqidNamer",
    "OrignameNamer",
    "DatePathNamer",
    "PropertyDirectoryNamer",
    "DirectoryPrefixNamer",
    "NamerNotFoundError",
    "load_namer",
    "load_directory_namer",
]
