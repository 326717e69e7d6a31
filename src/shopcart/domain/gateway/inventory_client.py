"""Abstract client for the remote inventory and catalog source."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.exceptions import InventoryUnavailableError
from shopcart.domain.model.product import ProductDetails
from shopcart.domain.model.stock import StockRecord


class InventoryClient(ABC):
    """Read-only view of remote stock and catalog data.

    Implementations must not cache: every call reflects the inventory
    source at the moment it is made. Any failure is raised as
    InventoryUnavailableError.
    """

    @abstractmethod
    async def get_stock(self, product_id: int) -> StockRecord:
        """Return the units currently available for ``product_id``."""

    @abstractmethod
    async def get_product(self, product_id: int) -> ProductDetails:
        """Return the catalog metadata for ``product_id``."""


def ensure_matches(product_id: int, record: StockRecord | ProductDetails) -> None:
    """Reject a record the inventory source returned for some other id."""
    if record.id != product_id:
        raise InventoryUnavailableError(
            f"Asked for product #{product_id}, inventory answered with #{record.id}"
        )
