"""Product value objects."""

from __future__ import annotations

from dataclasses import dataclass

from modules.products.constants import ProductConstraintCode
from modules.products.exceptions import ProductConstraintException


@dataclass(frozen=True)
class ProductId:
    """Identifier of a stored product (immutable, compared by value)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ProductConstraintException(
                f"Invalid product id {self.value!r}. It must be a positive integer.",
                ProductConstraintCode.INVALID_ID,
            )

    def __str__(self) -> str:
        return str(self.value)
