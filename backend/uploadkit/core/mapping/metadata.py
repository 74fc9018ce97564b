"""Declarative upload metadata for owner classes."""

from dataclasses import dataclass
from typing import Callable, TypeVar

T = TypeVar("T", bound=type)

METADATA_ATTR = "__uploadable_fields__"


@dataclass(frozen=True)
class UploadableField:
    """Marks an attribute as holding an upload for the given mapping."""

    mapping: str  # Mapping name from configuration
    file_name_property: str  # Attribute persisting the stored file name


def uploadable(**fields: UploadableField) -> Callable[[T], T]:
    """
    Class decorator declaring the uploadable attributes of an owner class.

    Example:
        @uploadable(image=UploadableField(mapping="product_image", file_name_property="image_name"))
        class Product:
            ...
    """

    def decorator(cls: T) -> T:
        for attr, field in fields.items():
            if not isinstance(field, UploadableField):
                raise TypeError(f"{cls.__name__}.{attr} must be declared with UploadableField")
        # Own dict only, so subclasses can extend without mutating the parent
        setattr(cls, METADATA_ATTR, dict(fields))
        return cls

    return decorator


class MetadataReader:
    """Reads upload metadata declared with @uploadable."""

    def is_uploadable(self, cls: type) -> bool:
        return any(METADATA_ATTR in vars(klass) for klass in cls.__mro__)

    def get_uploadable_fields(self, cls: type) -> dict[str, UploadableField]:
        """Return {attribute: UploadableField}, subclasses overriding parents."""
        fields: dict[str, UploadableField] = {}
        for klass in reversed(cls.__mro__):
            fields.update(vars(klass).get(METADATA_ATTR, {}))
        return fields

    def get_uploadable_field(self, cls: type, attr: str) -> UploadableField | None:
        return self.get_uploadable_fields(cls).get(attr)
