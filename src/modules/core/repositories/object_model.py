"""Generic persistence helpers for Django models.

Concrete repositories extend ``ObjectModelRepository`` and pass the model
class plus the domain exception they want raised.  The helpers never let a
Django exception escape: missing rows become the caller's "not found"
exception and any ``DatabaseError`` becomes the caller's failure exception
(or ``CoreException`` when no specific one applies).
"""

from __future__ import annotations

from typing import Iterable, Type, TypeVar

import structlog
from django.db import DatabaseError, models, transaction

from modules.core.exceptions import CoreException

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class ObjectModelRepository:
    """Base class with existence, load, partial update and delete helpers."""

    def assert_object_model_exists(
        self,
        object_id: int,
        model_class: Type[models.Model],
        exception_class: Type[CoreException],
    ) -> None:
        if not model_class._default_manager.filter(pk=object_id).exists():
            raise exception_class(
                f"{model_class.__name__} #{object_id} was not found"
            )

    def get_object_model(
        self,
        object_id: int,
        model_class: Type[M],
        exception_class: Type[CoreException],
    ) -> M:
        try:
            return model_class._default_manager.get(pk=object_id)
        except model_class.DoesNotExist:
            raise exception_class(
                f"{model_class.__name__} #{object_id} was not found"
            ) from None
        except DatabaseError as exc:
            raise CoreException(
                f"Error occurred when fetching {model_class.__name__} #{object_id}"
            ) from exc

    def partially_update_object_model(
        self,
        instance: models.Model,
        fields: Iterable[str],
        exception_class: Type[CoreException],
        error_code: int = 0,
    ) -> None:
        fields = list(fields)
        if not fields:
            return

        model_name = type(instance).__name__
        if instance.pk is None:
            raise exception_class(
                f"Cannot update {model_name} that was never saved", error_code
            )
        updatable = set()
        for field in instance._meta.concrete_fields:
            if not field.primary_key:
                updatable.update((field.name, field.attname))
        unknown = [name for name in fields if name not in updatable]
        if unknown:
            raise exception_class(
                f"Cannot update {model_name} #{instance.pk}: unknown fields "
                + ", ".join(unknown),
                error_code,
            )

        try:
            with transaction.atomic():
                instance.save(update_fields=fields)
        except DatabaseError as exc:
            logger.warning(
                "object_model.update_failed",
                model=type(instance).__name__,
                object_id=instance.pk,
                fields=fields,
                error=str(exc),
            )
            raise exception_class(
                f"Failed to update {type(instance).__name__} #{instance.pk}",
                error_code,
            ) from exc

    def delete_object_model(
        self,
        instance: models.Model,
        exception_class: Type[CoreException],
    ) -> None:
        object_id = instance.pk
        try:
            with transaction.atomic():
                instance.delete()
        except DatabaseError as exc:
            logger.warning(
                "object_model.delete_failed",
                model=type(instance).__name__,
                object_id=object_id,
                error=str(exc),
            )
            raise exception_class(
                f"Failed to delete {type(instance).__name__} #{object_id}"
            ) from exc
