"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry a formatted, read-only picture of the cart to the UI without
exposing the domain model.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.cart import Cart


@dataclass(frozen=True)
class CartItemDTO:
    """Output: a single cart line as displayed to the user."""

    id: int
    title: str
    image: str
    amount: int
    price: str  # formatted, e.g. "$15.00"
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart as displayed to the user."""

    items: list[CartItemDTO]
    item_count: int
    total: str

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            items=[
                CartItemDTO(
                    id=item.id,
                    title=item.title,
                    image=item.image,
                    amount=item.amount,
                    price=str(item.price),
                    subtotal=str(item.subtotal),
                )
                for item in cart
            ],
            item_count=cart.item_count,
            total=str(cart.total),
        )
