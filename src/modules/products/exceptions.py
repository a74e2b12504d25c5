"""Product domain exceptions.

Raised by ``ProductDjangoRepository`` and ``ProductService``.  Only
``CannotDeleteProduct`` is ever recovered locally (by bulk delete, which
aggregates them into ``CannotBulkDeleteProduct``); every other kind
propagates to the caller unchanged.
"""

from __future__ import annotations

from typing import List

from modules.core.exceptions import CoreException


class ProductNotFound(CoreException):
    """One or more requested products do not exist."""


class ProductConstraintException(CoreException):
    """A product id or a product field value violates a domain constraint.

    ``errors`` maps field names to messages when raised by validation.
    """

    def __init__(self, message: str = "", code: int = 0, errors=None) -> None:
        super().__init__(message, code)
        self.errors = errors or {}


class CannotUpdateProduct(CoreException):
    """Persisting a partial update failed.

    ``code`` is the ``ProductUpdateErrorCode`` supplied by the caller.
    """


class CannotDeleteProduct(CoreException):
    """Deleting a single product failed in the storage backend."""


class CannotBulkDeleteProduct(CoreException):
    """Some products of a bulk delete could not be deleted.

    The other products of the batch were deleted and stay deleted.
    """

    def __init__(self, failed_ids: List[int], message: str = "") -> None:
        super().__init__(message)
        self.failed_ids = list(failed_ids)
