"""Unit tests for the product DTOs."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    RelatedProductDTO,
    UpdateProductDetailsDTO,
    UpdateProductOptionsDTO,
    UpdateProductPricesDTO,
)

pytestmark = pytest.mark.unit


class TestRelatedProductDTO:
    def test_builds_from_row(self):
        dto = RelatedProductDTO.model_validate(
            {"id_product": 3, "name": "Mug", "reference": "demo_11"}
        )
        assert dto.id_product == 3
        assert dto.name == "Mug"

    def test_is_frozen(self):
        dto = RelatedProductDTO(id_product=3, name="Mug")
        with pytest.raises(ValidationError):
            dto.name = "Cup"


class TestUpdateProductPricesDTO:
    def test_only_set_fields_are_reported(self):
        dto = UpdateProductPricesDTO(wholesale_price=Decimal("2"))
        assert dto.updated_fields() == ["wholesale_price"]

    def test_nothing_set(self):
        assert UpdateProductPricesDTO().updated_fields() == []

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be negative"):
            UpdateProductPricesDTO(price=Decimal("-1"))

    def test_explicit_null_rejected(self):
        with pytest.raises(ValidationError, match="Price cannot be null"):
            UpdateProductPricesDTO(price=None)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductPricesDTO(ecotax=Decimal("1"))


class TestUpdateProductDetailsDTO:
    def test_strips_values(self):
        dto = UpdateProductDetailsDTO(reference="  demo_1 ", ean13=None)
        assert dto.reference == "demo_1"
        assert dto.ean13 == ""
        assert dto.updated_fields() == ["ean13", "reference"]


class TestUpdateProductOptionsDTO:
    def test_active_flag(self):
        assert UpdateProductOptionsDTO(active=False).updated_fields() == ["active"]

    def test_null_active_rejected(self):
        with pytest.raises(ValidationError):
            UpdateProductOptionsDTO(active=None)
