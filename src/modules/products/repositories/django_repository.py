"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` on top of ``ObjectModelRepository``.
Every failure surfaces as a typed domain exception; nothing is retried and
no fallback value is ever returned.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.db import DatabaseError
from django.db import connection as default_connection

from modules.core.exceptions import CoreException
from modules.core.repositories.object_model import ObjectModelRepository
from modules.core.value_objects import LanguageId
from modules.products.dtos import RelatedProductDTO
from modules.products.exceptions import (
    CannotBulkDeleteProduct,
    CannotDeleteProduct,
    CannotUpdateProduct,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.products.validators import ProductValidator
from modules.products.value_objects import ProductId

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(ObjectModelRepository, IProductRepository):
    """Concrete Product repository backed by Django ORM.

    ``connection`` is only used for the bulk existence count, which runs as
    plain SQL.  It reads ``Product._meta.db_table`` unless ``db_prefix`` is
    given, in which case ``<db_prefix>product`` must name the same table the
    models were built with.
    """

    def __init__(
        self,
        connection=None,
        db_prefix: Optional[str] = None,
        product_validator: Optional[ProductValidator] = None,
    ) -> None:
        self._connection = default_connection if connection is None else connection
        self._product_table = (
            Product._meta.db_table if db_prefix is None else f"{db_prefix}product"
        )
        self._validator = product_validator or ProductValidator()

    # ------------------------------------------------------------------
    # Existence
    # ------------------------------------------------------------------

    def assert_product_exists(self, product_id: ProductId) -> None:
        self.assert_object_model_exists(product_id.value, Product, ProductNotFound)

    def assert_all_products_exist(self, product_ids: Iterable[ProductId]) -> None:
        """Check every product exists with a single COUNT query.

        Duplicates are ignored.  On mismatch the error lists the whole
        requested set, not the missing ids.
        """
        ids = list(dict.fromkeys(product_id.value for product_id in product_ids))
        if not ids:
            return

        table = self._connection.ops.quote_name(self._product_table)
        placeholders = ", ".join(["%s"] * len(ids))
        with self._connection.cursor() as cursor:
            cursor.execute(
                f"SELECT COUNT(id_product) AS product_count FROM {table} "
                f"WHERE id_product IN ({placeholders})",
                ids,
            )
            row = cursor.fetchone()

        if not row or int(row[0]) != len(ids):
            raise ProductNotFound(
                "Some of these products do not exist: %s" % ",".join(map(str, ids))
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_related_products(
        self, product_id: ProductId, language_id: LanguageId
    ) -> List[RelatedProductDTO]:
        self.assert_product_exists(product_id)
        product_id_value = product_id.value

        try:
            rows = Product.get_accessories_light(language_id.value, product_id_value)
        except DatabaseError as exc:
            raise CoreException(
                "Error occurred when fetching related products for product #%d"
                % product_id_value
            ) from exc

        return [RelatedProductDTO.model_validate(row) for row in rows]

    def get(self, product_id: ProductId) -> Product:
        return self.get_object_model(product_id.value, Product, ProductNotFound)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def partial_update(
        self, product: Product, fields: Iterable[str], error_code: int
    ) -> None:
        fields = list(fields)
        self._validator.validate(product)
        if not fields:
            return
        self.partially_update_object_model(
            product, fields, CannotUpdateProduct, error_code
        )
        logger.info(
            "product.partially_updated",
            product_id=product.pk,
            fields=fields,
        )

    def delete(self, product_id: ProductId) -> None:
        self.delete_object_model(self.get(product_id), CannotDeleteProduct)
        logger.info("product.deleted", product_id=product_id.value)

    def bulk_delete(self, product_ids: Iterable[ProductId]) -> None:
        """Delete products one by one, collecting failures.

        Only ``CannotDeleteProduct`` is collected.  Any other error, such as
        ``ProductNotFound``, aborts the batch immediately; products deleted
        before that stay deleted.
        """
        failed_ids: List[int] = []
        for product_id in product_ids:
            try:
                self.delete(product_id)
            except CannotDeleteProduct:
                failed_ids.append(product_id.value)

        if not failed_ids:
            return

        logger.warning("product.bulk_delete_failed", failed_ids=failed_ids)
        raise CannotBulkDeleteProduct(
            failed_ids,
            'Failed to delete following products: "%s"'
            % ", ".join(map(str, failed_ids)),
        )
