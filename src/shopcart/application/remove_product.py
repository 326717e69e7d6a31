"""Application service: Remove Product use case."""

from __future__ import annotations

from shopcart.domain.model.cart import Cart


class RemoveProductHandler:

    def handle(self, cart: Cart, product_id: int) -> Cart:
        """Drop a product from the cart.

        No inventory lookup is needed. Raises ProductNotInCartError if
        the id is absent.
        """
        return cart.without(product_id)
