"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``RelatedProductDTO``: one row of the related-products read.
- ``UpdateProductPricesDTO`` / ``UpdateProductDetailsDTO`` /
  ``UpdateProductOptionsDTO``: inputs for partial updates.  Only the
  fields a caller explicitly sets are written (``model_fields_set``).
"""

from __future__ import annotations

from decimal import Decimal
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class RelatedProductDTO(BaseModel):
    """Lightweight record of a related product."""

    model_config = ConfigDict(frozen=True)

    id_product: int
    name: str
    reference: str = ""


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class PartialUpdateDTO(BaseModel):
    """Base for partial update inputs."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def updated_fields(self) -> List[str]:
        """Names of the fields the caller explicitly provided, sorted."""
        return sorted(self.model_fields_set)


class UpdateProductPricesDTO(PartialUpdateDTO):
    price: Decimal | None = None
    wholesale_price: Decimal | None = None

    @field_validator("price", "wholesale_price")
    @classmethod
    def must_not_be_negative(cls, v: Decimal | None) -> Decimal | None:
        if v is None:
            raise ValueError("Price cannot be null.")
        if v < 0:
            raise ValueError("Price cannot be negative.")
        return v


class UpdateProductDetailsDTO(PartialUpdateDTO):
    reference: str | None = None
    ean13: str | None = None

    @field_validator("reference", "ean13")
    @classmethod
    def strip(cls, v: str | None) -> str:
        return (v or "").strip()


class UpdateProductOptionsDTO(PartialUpdateDTO):
    active: bool | None = None

    @field_validator("active")
    @classmethod
    def active_must_be_set(cls, v: bool | None) -> bool:
        if v is None:
            raise ValueError("Active flag cannot be null.")
        return v
