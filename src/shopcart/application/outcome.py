"""Operation outcomes, the only thing CartStore hands back to callers.

Each CartStore operation resolves to exactly one of these values instead
of raising. ``cart`` is always the cart as it stands after the operation,
so callers can render it without going back to the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from shopcart.domain.model.cart import Cart


class Operation(Enum):
    ADD_PRODUCT = "add_product"
    REMOVE_PRODUCT = "remove_product"
    UPDATE_PRODUCT_AMOUNT = "update_product_amount"


class FailureKind(Enum):
    STOCK_EXCEEDED = "stock_exceeded"
    PRODUCT_NOT_IN_CART = "product_not_in_cart"
    OPERATION_FAILED = "operation_failed"


@dataclass(frozen=True)
class Committed:
    """The mutation was validated, persisted and applied."""

    operation: Operation
    cart: Cart

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    """A business rule refused the mutation; nothing changed."""

    operation: Operation
    reason: FailureKind
    cart: Cart

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Failed:
    """Something unexpected went wrong; nothing changed.

    ``cause`` keeps the original exception for diagnostics. It is never
    shown to the user.
    """

    operation: Operation
    cause: BaseException
    cart: Cart

    @property
    def reason(self) -> FailureKind:
        return FailureKind.OPERATION_FAILED

    @property
    def ok(self) -> bool:
        return False


@dataclass(frozen=True)
class Ignored:
    """The request was a no-op by design (e.g. a non-positive amount)."""

    operation: Operation
    cart: Cart

    @property
    def ok(self) -> bool:
        return True


Outcome = Union[Committed, Rejected, Failed, Ignored]
