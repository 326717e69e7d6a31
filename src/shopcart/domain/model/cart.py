"""Cart aggregate: the user's ordered selection of products.

A Cart is an immutable value: every mutation returns a new Cart and leaves
the original untouched, so a snapshot handed to the UI can never change
under its feet and a failed operation has nothing to roll back.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from shopcart.domain.exceptions import ProductNotInCartError, ValidationError
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - every item has ``amount > 0`` (enforced by Product itself)
    - no two items share an ``id``
    - items keep first-add order; updates replace in place
    """

    items: tuple[Product, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))
        seen: set[int] = set()
        for item in self.items:
            if item.id in seen:
                raise ValidationError(f"Duplicate product #{item.id} in cart")
            seen.add(item.id)

    @classmethod
    def empty(cls) -> Cart:
        return cls()

    @classmethod
    def of(cls, items: Iterable[Product]) -> Cart:
        return cls(tuple(items))

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> Product | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def contains(self, product_id: int) -> bool:
        return self.find(product_id) is not None

    @property
    def item_count(self) -> int:
        """Total number of units across all items."""
        return sum(item.amount for item in self.items)

    @property
    def total(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.subtotal
        return total

    def __iter__(self) -> Iterator[Product]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    # --- Transitions ----------------------------------------------------------

    def with_item(self, product: Product) -> Cart:
        """Append a product that is not yet in the cart."""
        if self.contains(product.id):
            raise ValidationError(f"Product #{product.id} is already in the cart")
        return Cart(self.items + (product,))

    def with_amount(self, product_id: int, amount: int) -> Cart:
        """Set the amount of an item already in the cart, keeping its position."""
        if not self.contains(product_id):
            raise ProductNotInCartError(product_id)
        return Cart(tuple(
            item.with_amount(amount) if item.id == product_id else item
            for item in self.items
        ))

    def without(self, product_id: int) -> Cart:
        if not self.contains(product_id):
            raise ProductNotInCartError(product_id)
        return Cart(tuple(item for item in self.items if item.id != product_id))
