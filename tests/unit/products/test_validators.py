"""Unit tests for ProductValidator."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.constants import ProductConstraintCode
from modules.products.exceptions import ProductConstraintException
from modules.products.models import Product
from modules.products.validators import ProductValidator

pytestmark = pytest.mark.unit


class TestProductValidator:
    def test_valid_product_passes(self, make_product):
        ProductValidator().validate(make_product())

    def test_collects_every_invalid_field(self):
        product = Product(price=Decimal("-1"), ean13="not-digits")

        with pytest.raises(ProductConstraintException) as exc_info:
            ProductValidator().validate(product)

        exc = exc_info.value
        assert exc.code == ProductConstraintCode.INVALID_FIELD
        assert set(exc.errors) == {"ean13", "price"}
        assert "price: Price cannot be negative." in str(exc)

    def test_normalises_reference(self, make_product):
        product = make_product()
        product.reference = "  demo_9 "
        ProductValidator().validate(product)
        assert product.reference == "demo_9"
