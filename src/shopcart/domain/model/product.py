"""Product: a catalog item plus the quantity the user intends to buy.

The catalog owns title, price and image; the cart only carries them along
for display. The ``amount`` is the one field the cart actually manages.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import Money


def _require_int(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"Product {name} must be an integer, got {type(value).__name__}"
        )


def _require_text(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise ValidationError(
            f"Product {name} must be a string, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class ProductDetails:
    """Catalog metadata as served by ``GET /products/{id}``."""

    id: int
    title: str
    price: Money
    image: str

    def __post_init__(self) -> None:
        _require_int("id", self.id)
        _require_text("title", self.title)
        _require_text("image", self.image)

    def to_cart_item(self, amount: int) -> Product:
        return Product(
            id=self.id,
            title=self.title,
            price=self.price,
            image=self.image,
            amount=amount,
        )


@dataclass(frozen=True)
class Product:
    """A line item in the cart.

    Invariants:
    - ``id`` is an integer catalog identifier
    - ``title`` and ``image`` are strings
    - ``amount`` is a positive integer
    """

    id: int
    title: str
    price: Money
    image: str
    amount: int

    def __post_init__(self) -> None:
        _require_int("id", self.id)
        _require_text("title", self.title)
        _require_text("image", self.image)
        _require_int("amount", self.amount)
        if self.amount <= 0:
            raise ValidationError(
                f"Product amount must be positive, got {self.amount}"
            )

    @property
    def subtotal(self) -> Money:
        return self.price * self.amount

    def with_amount(self, amount: int) -> Product:
        """Return a copy of this item holding ``amount`` units."""
        return replace(self, amount=amount)
