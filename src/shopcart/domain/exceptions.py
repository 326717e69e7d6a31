"""Domain-level exceptions.

Every failure inside the cart core is expressed as a subclass of
DomainException. CartStore is the only place that catches them and turns
them into operation outcomes; nothing here ever reaches the UI as an
exception.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ProductNotInCartError(EntityNotFoundError):
    """The operation targets a product id that is not in the cart."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product #{product_id} is not in the cart")


class StockExceededError(ValidationError):
    """The requested amount is larger than the stock currently available."""

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product #{product_id} "
            f"(need {requested}, have {available} available)"
        )


class InventoryUnavailableError(DomainException):
    """The inventory source failed or answered with an unusable payload."""


class PersistenceError(DomainException):
    """The cart could not be written to durable storage."""
