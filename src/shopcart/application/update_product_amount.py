"""Application service: Update Product Amount use case.

The stock check runs before the presence check, so an out-of-stock
request for an item that is not in the cart reports the stock problem.
"""

from __future__ import annotations

from shopcart.domain.gateway.inventory_client import InventoryClient, ensure_matches
from shopcart.domain.model.cart import Cart


class UpdateProductAmountHandler:

    def __init__(self, inventory_client: InventoryClient) -> None:
        self._inventory_client = inventory_client

    async def handle(self, cart: Cart, product_id: int, amount: int) -> Cart:
        """Set the amount held for a product already in the cart.

        Callers must filter out ``amount <= 0`` beforehand; the cart
        would reject it anyway.
        """
        stock = await self._inventory_client.get_stock(product_id)
        ensure_matches(product_id, stock)
        stock.ensure_available(amount)
        return cart.with_amount(product_id, amount)
