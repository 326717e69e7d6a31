"""Application service: Add Product use case."""

from __future__ import annotations

from shopcart.domain.gateway.inventory_client import InventoryClient, ensure_matches
from shopcart.domain.model.cart import Cart


class AddProductHandler:

    def __init__(self, inventory_client: InventoryClient) -> None:
        self._inventory_client = inventory_client

    async def handle(self, cart: Cart, product_id: int) -> Cart:
        """Add one unit of a product to the cart.

        Steps:
        1. Look up the product in the current cart.
        2. Fetch fresh stock and check the incremented amount fits.
        3. Bump the existing item, or fetch catalog details and append.

        Raises StockExceededError when the new amount is not available.
        """
        existing = cart.find(product_id)
        stock = await self._inventory_client.get_stock(product_id)
        ensure_matches(product_id, stock)
        amount = existing.amount + 1 if existing is not None else 1

        stock.ensure_available(amount)

        if existing is not None:
            return cart.with_amount(product_id, amount)

        details = await self._inventory_client.get_product(product_id)
        ensure_matches(product_id, details)
        return cart.with_item(details.to_cart_item(amount))
