"""StockRecord: units currently available for one catalog item.

Fetched fresh for every validation and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.exceptions import StockExceededError, ValidationError


@dataclass(frozen=True)
class StockRecord:

    id: int
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Stock amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(f"Stock amount cannot be negative, got {self.amount}")

    def ensure_available(self, requested: int) -> None:
        """Raise StockExceededError if ``requested`` units are not in stock."""
        if requested > self.amount:
            raise StockExceededError(self.id, requested, self.amount)
