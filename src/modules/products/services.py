"""Product service layer (Use Cases).

Orchestrates product commands and queries, delegating persistence to the
injected ``IProductRepository``.  Callers pass plain integers; they are
turned into value objects here, so an invalid id fails before any
repository call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

import structlog

from modules.core.value_objects import LanguageId
from modules.products.constants import ProductUpdateErrorCode
from modules.products.value_objects import ProductId

if TYPE_CHECKING:
    from modules.products.dtos import (
        PartialUpdateDTO,
        RelatedProductDTO,
        UpdateProductDetailsDTO,
        UpdateProductOptionsDTO,
        UpdateProductPricesDTO,
    )
    from modules.products.models import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_related_products(
        self, product_id: int, language_id: int
    ) -> List[RelatedProductDTO]:
        """Related products of ``product_id`` named in ``language_id``.

        Raises:
            ProductNotFound: if the product does not exist.
            CoreException: if the related products could not be read.
        """
        return self._repo.get_related_products(
            ProductId(product_id), LanguageId(language_id)
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def update_prices(self, product_id: int, dto: UpdateProductPricesDTO) -> Product:
        return self._update(product_id, dto, ProductUpdateErrorCode.FAILED_UPDATE_PRICES)

    def update_details(self, product_id: int, dto: UpdateProductDetailsDTO) -> Product:
        return self._update(product_id, dto, ProductUpdateErrorCode.FAILED_UPDATE_DETAILS)

    def update_options(self, product_id: int, dto: UpdateProductOptionsDTO) -> Product:
        return self._update(product_id, dto, ProductUpdateErrorCode.FAILED_UPDATE_OPTIONS)

    def delete_product(self, product_id: int) -> None:
        """Delete a single product.

        Raises:
            ProductNotFound: if the product does not exist.
            CannotDeleteProduct: if the storage refused the delete.
        """
        self._repo.delete(ProductId(product_id))

    def bulk_delete_products(self, product_ids: Iterable[int]) -> None:
        """Delete several products, best effort.

        Raises:
            ProductNotFound: on the first missing product (the batch stops).
            CannotBulkDeleteProduct: listing every product that failed.
        """
        ids = [ProductId(product_id) for product_id in product_ids]
        self._repo.bulk_delete(ids)
        logger.info("product.bulk_deleted", count=len(ids))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _update(
        self, product_id: int, dto: PartialUpdateDTO, error_code: int
    ) -> Product:
        """Apply the fields set on ``dto`` and persist only those.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductConstraintException: if the resulting product is invalid.
            CannotUpdateProduct: carrying ``error_code`` on storage failure.
        """
        product = self._repo.get(ProductId(product_id))
        fields = dto.updated_fields()
        for field in fields:
            setattr(product, field, getattr(dto, field))

        self._repo.partial_update(product, fields, error_code)
        logger.bind(product_id=product_id).info(
            "product.updated", error_code=int(error_code), fields=fields
        )
        return product
