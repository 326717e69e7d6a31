"""CartStore: the single owner of the in-memory cart.

The store is created explicitly and passed to whoever needs it; there is
no module-level instance. It orchestrates the use-case handlers, commits
their result (persist first, then swap the in-memory cart) and converts
every exception into an Outcome plus, where appropriate, one error
notification.

Operations are serialized through an asyncio.Lock: each one reads the
cart only after the previous one has committed, so two rapid
``add_product`` calls for the same id both count.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from shopcart.application.add_product import AddProductHandler
from shopcart.application.dto import CartDTO
from shopcart.application.outcome import (
    Committed,
    Failed,
    FailureKind,
    Ignored,
    Operation,
    Outcome,
    Rejected,
)
from shopcart.application.remove_product import RemoveProductHandler
from shopcart.application.update_product_amount import UpdateProductAmountHandler
from shopcart.domain.exceptions import ProductNotInCartError, StockExceededError
from shopcart.domain.gateway.inventory_client import InventoryClient
from shopcart.domain.gateway.notification_sink import NotificationLevel, NotificationSink
from shopcart.domain.model.cart import Cart
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)

CartListener = Callable[[Cart], None]

STOCK_EXCEEDED_MESSAGE = "Requested quantity is out of stock"

FAILURE_MESSAGES: dict[Operation, str] = {
    Operation.ADD_PRODUCT: "Error adding product",
    Operation.REMOVE_PRODUCT: "Error removing product",
    Operation.UPDATE_PRODUCT_AMOUNT: "Error changing product amount",
}


def message_for(operation: Operation, reason: FailureKind) -> str:
    """Fixed user-facing text for a rejected or failed operation."""
    if reason is FailureKind.STOCK_EXCEEDED:
        return STOCK_EXCEEDED_MESSAGE
    return FAILURE_MESSAGES[operation]


class CartStore:

    def __init__(
        self,
        cart_repository: CartRepository,
        inventory_client: InventoryClient,
        notification_sink: NotificationSink,
    ) -> None:
        self._cart_repository = cart_repository
        self._notification_sink = notification_sink
        self._add_product = AddProductHandler(inventory_client)
        self._remove_product = RemoveProductHandler()
        self._update_product_amount = UpdateProductAmountHandler(inventory_client)
        self._listeners: list[CartListener] = []
        self._lock = asyncio.Lock()
        self._cart = cart_repository.load()

    # --- Read side ------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        """The last committed cart. Immutable; safe to hand out."""
        return self._cart

    def view(self) -> CartDTO:
        return CartDTO.from_cart(self._cart)

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call ``listener`` with the new cart after every commit.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # --- Operations -----------------------------------------------------------

    async def add_product(self, product_id: int) -> Outcome:
        async def mutate(cart: Cart) -> Cart:
            return await self._add_product.handle(cart, product_id)

        return await self._run(Operation.ADD_PRODUCT, product_id, mutate)

    async def remove_product(self, product_id: int) -> Outcome:
        async def mutate(cart: Cart) -> Cart:
            return self._remove_product.handle(cart, product_id)

        return await self._run(Operation.REMOVE_PRODUCT, product_id, mutate)

    async def update_product_amount(self, product_id: int, amount: int) -> Outcome:
        async def mutate(cart: Cart) -> Cart | None:
            # Non-positive amounts are a UI slip, not an error: no lookup, no message.
            if amount <= 0:
                return None
            return await self._update_product_amount.handle(cart, product_id, amount)

        return await self._run(Operation.UPDATE_PRODUCT_AMOUNT, product_id, mutate)

    # --- Internals ------------------------------------------------------------

    async def _run(
        self,
        operation: Operation,
        product_id: int,
        mutate: Callable[[Cart], Awaitable[Cart | None]],
    ) -> Outcome:
        async with self._lock:
            current = self._cart
            try:
                new_cart = await mutate(current)
                if new_cart is None:
                    logger.debug("%s on product #%s ignored", operation.value, product_id)
                    return Ignored(operation, current)
                self._commit(new_cart)
            except StockExceededError as exc:
                return self._reject(operation, FailureKind.STOCK_EXCEEDED, exc, current)
            except ProductNotInCartError as exc:
                return self._reject(operation, FailureKind.PRODUCT_NOT_IN_CART, exc, current)
            except Exception as exc:
                logger.error(
                    "%s on product #%s failed", operation.value, product_id, exc_info=exc
                )
                self._notify(message_for(operation, FailureKind.OPERATION_FAILED))
                return Failed(operation, exc, current)

            logger.info(
                "%s on product #%s committed (%d items)",
                operation.value, product_id, len(new_cart),
            )
            self._publish(new_cart)
            return Committed(operation, new_cart)

    def _commit(self, cart: Cart) -> None:
        """Persist, then make ``cart`` the active cart.

        If the save raises, the in-memory cart is left as it was.
        """
        self._cart_repository.save(cart)
        self._cart = cart

    def _reject(
        self,
        operation: Operation,
        reason: FailureKind,
        exc: Exception,
        cart: Cart,
    ) -> Rejected:
        logger.info("%s rejected: %s", operation.value, exc)
        self._notify(message_for(operation, reason))
        return Rejected(operation, reason, cart)

    def _notify(self, message: str) -> None:
        try:
            self._notification_sink.notify(NotificationLevel.ERROR, message)
        except Exception:
            logger.exception("Notification sink failed to deliver %r", message)

    def _publish(self, cart: Cart) -> None:
        for listener in list(self._listeners):
            try:
                listener(cart)
            except Exception:
                logger.exception("Cart listener %r failed", listener)
