"""SQLAlchemy lifecycle wiring for uploadable models.

Usage:
    register_listeners(Product, handler)

    product = Product(title="Lamp", image=uploaded_file)
    session.add(product)
    session.commit()  # file moved, product.image_name set

Note: before_update only fires when a mapped column changed. Assigning a new
upload alone does not make the row dirty; touch a column (e.g. updated_at)
together with the upload.
"""

from typing import Any

from sqlalchemy import event

from uploadkit.core.handler import UploadHandler
from uploadkit.core.logging import get_logger
from uploadkit.core.mapping.factory import NotUploadableError

logger = get_logger(__name__)


def register_listeners(model: type, handler: UploadHandler) -> None:
    """Attach upload/remove/inject hooks to a mapped, uploadable class."""
    if not handler.factory.metadata.is_uploadable(model):
        raise NotUploadableError(f"{model.__name__} is not uploadable")

    def before_insert(mapper: Any, connection: Any, target: Any) -> None:
        handler.upload(target)

    def before_update(mapper: Any, connection: Any, target: Any) -> None:
        handler.clean(target)
        handler.upload(target)

    def after_delete(mapper: Any, connection: Any, target: Any) -> None:
        handler.remove(target)

    def on_load(target: Any, context: Any) -> None:
        handler.inject(target)

    event.listen(model, "before_insert", before_insert, propagate=True)
    event.listen(model, "before_update", before_update, propagate=True)
    event.listen(model, "after_delete", after_delete, propagate=True)
    event.listen(model, "load", on_load, propagate=True)

    logger.debug("upload_listeners_registered", model=model.__name__)
