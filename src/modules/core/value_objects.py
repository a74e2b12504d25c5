"""Value objects shared across modules."""

from __future__ import annotations

from dataclasses import dataclass

from modules.core.exceptions import LanguageConstraintException


@dataclass(frozen=True)
class LanguageId:
    """Identifier of a store language (immutable)."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise LanguageConstraintException(
                f"Invalid language id {self.value!r}. It must be a positive integer."
            )
