"""Abstract repository for the Cart aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON file, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """Return the stored cart, or an empty cart if none can be read."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Overwrite the stored cart. Raises PersistenceError on failure."""
