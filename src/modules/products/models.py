"""Product aggregate and its satellite tables.

Tables (all names carry ``settings.DB_TABLE_PREFIX``):
- ``product``: the aggregate root, primary key column ``id_product``.
- ``product_lang``: per-language product name.
- ``accessory``: ordered "related product" links between two products.

Translations and accessory links are removed together with their product.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, List

import structlog
from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models
from django.db.models import F

from modules.core.models import TimestampedModel
from modules.products.constants import (
    EAN13_MAX_LENGTH,
    NAME_MAX_LENGTH,
    REFERENCE_MAX_LENGTH,
)

logger = structlog.get_logger(__name__)

ean13_validator = RegexValidator(
    regex=r"^[0-9]{0,13}$",
    message="EAN-13 must contain up to 13 digits.",
)


class Product(TimestampedModel):
    """Product aggregate root.

    ``reference`` is stripped on clean/save so lookups by reference are not
    defeated by stray whitespace.
    """

    id = models.AutoField(primary_key=True, db_column="id_product")
    reference = models.CharField(max_length=REFERENCE_MAX_LENGTH, blank=True, default="")
    ean13 = models.CharField(
        max_length=EAN13_MAX_LENGTH,
        blank=True,
        default="",
        validators=[ean13_validator],
    )
    price = models.DecimalField(max_digits=20, decimal_places=6, default=Decimal("0"))
    wholesale_price = models.DecimalField(
        max_digits=20, decimal_places=6, default=Decimal("0")
    )
    active = models.BooleanField(default=True)
    accessories = models.ManyToManyField(
        "self",
        through="ProductAccessory",
        through_fields=("product", "accessory"),
        symmetrical=False,
        related_name="accessory_of",
        blank=True,
    )

    class Meta:
        db_table = f"{settings.DB_TABLE_PREFIX}product"
        ordering = ["id"]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.reference:
            self.reference = self.reference.strip()
        errors = {}
        if self.price is not None and self.price < 0:
            errors["price"] = "Price cannot be negative."
        if self.wholesale_price is not None and self.wholesale_price < 0:
            errors["wholesale_price"] = "Wholesale price cannot be negative."
        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        if self.reference:
            self.reference = self.reference.strip()
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.pk,
                reference=self.reference,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @classmethod
    def get_accessories_light(cls, language_id: int, product_id: int) -> List[Dict[str, Any]]:
        """Return the accessories of a product as plain rows.

        Each row holds ``id_product``, ``name`` (in ``language_id``) and
        ``reference``, ordered by link position.  Accessories that have no
        name in that language are left out.
        """
        rows = (
            ProductAccessory.objects.filter(
                product_id=product_id,
                accessory__translations__language_id=language_id,
            )
            .order_by("position", "accessory_id")
            .values(
                id_product=F("accessory_id"),
                name=F("accessory__translations__name"),
                reference=F("accessory__reference"),
            )
        )
        return list(rows)

    def __str__(self) -> str:
        return f"#{self.pk} {self.reference}".strip()


class ProductLang(models.Model):
    """Language-scoped product fields."""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="translations",
        db_column="id_product",
    )
    language_id = models.PositiveIntegerField(db_column="id_lang")
    name = models.CharField(max_length=NAME_MAX_LENGTH)

    class Meta:
        db_table = f"{settings.DB_TABLE_PREFIX}product_lang"
        constraints = [
            models.UniqueConstraint(
                fields=["product", "language_id"],
                name="product_lang_unique_language",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.language_id})"


class ProductAccessory(models.Model):
    """Link from a product to one of its related products."""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="accessory_links",
        db_column="id_product_1",
    )
    accessory = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name="+",
        db_column="id_product_2",
    )
    position = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = f"{settings.DB_TABLE_PREFIX}accessory"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["product", "accessory"],
                name="accessory_unique_link",
            ),
        ]
