"""Product repository interface.

Service-layer code depends on this abstraction, never on the Django ORM
directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterable, List

if TYPE_CHECKING:
    from modules.core.value_objects import LanguageId
    from modules.products.dtos import RelatedProductDTO
    from modules.products.models import Product
    from modules.products.value_objects import ProductId


class IProductRepository(ABC):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def assert_product_exists(self, product_id: ProductId) -> None:
        """Raise ``ProductNotFound`` unless the product is stored."""

    @abstractmethod
    def assert_all_products_exist(self, product_ids: Iterable[ProductId]) -> None:
        """Raise ``ProductNotFound`` unless every given product is stored."""

    @abstractmethod
    def get_related_products(
        self, product_id: ProductId, language_id: LanguageId
    ) -> List[RelatedProductDTO]:
        """List the related products of a product, named in ``language_id``."""

    @abstractmethod
    def get(self, product_id: ProductId) -> Product:
        """Load a product or raise ``ProductNotFound``."""

    @abstractmethod
    def partial_update(
        self, product: Product, fields: Iterable[str], error_code: int
    ) -> None:
        """Validate the product, then persist only ``fields``."""

    @abstractmethod
    def delete(self, product_id: ProductId) -> None:
        """Delete a product or raise ``CannotDeleteProduct``."""

    @abstractmethod
    def bulk_delete(self, product_ids: Iterable[ProductId]) -> None:
        """Delete every product, then report all failures at once."""
