from decimal import Decimal

import pytest

from modules.products.models import Product, ProductAccessory, ProductLang


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def make_product():
    """Factory creating a stored product, optionally named in language 1."""

    def _make(name: str | None = None, language_id: int = 1, **overrides) -> Product:
        defaults = {
            "reference": "demo_1",
            "price": Decimal("23.90"),
            "wholesale_price": Decimal("5.49"),
        }
        defaults.update(overrides)
        product = Product.objects.create(**defaults)
        if name is not None:
            ProductLang.objects.create(product=product, language_id=language_id, name=name)
        return product

    return _make


@pytest.fixture()
def link_accessory():
    def _link(product: Product, accessory: Product, position: int = 0) -> ProductAccessory:
        return ProductAccessory.objects.create(
            product=product, accessory=accessory, position=position
        )

    return _link
