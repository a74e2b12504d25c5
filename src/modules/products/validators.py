"""Domain validation run before a product is persisted."""

from __future__ import annotations

import structlog
from django.core.exceptions import ValidationError

from modules.products.constants import ProductConstraintCode
from modules.products.exceptions import ProductConstraintException
from modules.products.models import Product

logger = structlog.get_logger(__name__)


class ProductValidator:
    """Validates a ``Product`` instance as a whole.

    Translates Django's ``ValidationError`` into
    ``ProductConstraintException`` so the repository callers only deal
    with domain exceptions.
    """

    def validate(self, product: Product) -> None:
        try:
            product.full_clean(validate_unique=False)
        except ValidationError as exc:
            errors = exc.message_dict
            logger.warning(
                "product.validation_failed",
                product_id=product.pk,
                fields=sorted(errors),
            )
            raise ProductConstraintException(
                f"Product #{product.pk} is invalid: "
                + "; ".join(f"{field}: {' '.join(msgs)}" for field, msgs in sorted(errors.items())),
                ProductConstraintCode.INVALID_FIELD,
                errors,
            ) from exc
