"""JSON-file-backed implementation of CartRepository.

The file holds an object of named slots, the way browser local storage
does; this repository owns exactly one slot and leaves the others alone:

    {"@RocketShoes:cart": [{"id": 1, "title": "...", "price": 179.9,
                            "image": "...", "amount": 2}]}
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from shopcart.domain.exceptions import DomainException, PersistenceError
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.product import Product
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.infrastructure.config import DEFAULT_STORAGE_KEY

logger = logging.getLogger(__name__)


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._file_path = file_path
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> Cart:
        slots = self._read_slots()
        if self._key not in slots:
            return Cart.empty()
        try:
            return self._to_domain(slots[self._key])
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            logger.warning(
                "Discarding unreadable cart in %s[%r]: %s", self._file_path, self._key, exc
            )
            return Cart.empty()

    def save(self, cart: Cart) -> None:
        slots = self._read_slots()
        slots[self._key] = self._to_raw(cart)
        try:
            self._write_atomic(json.dumps(slots, indent=2) + "\n")
        except OSError as exc:
            raise PersistenceError(f"Could not write cart to {self._file_path}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> list[dict]:
        return [
            {
                "id": item.id,
                "title": item.title,
                "price": item.price.to_number(),
                "image": item.image,
                "amount": item.amount,
            }
            for item in cart
        ]

    @staticmethod
    def _to_domain(raw: list[dict]) -> Cart:
        if not isinstance(raw, list):
            raise TypeError(f"expected a list of products, got {type(raw).__name__}")
        return Cart.of(
            Product(
                id=item["id"],
                title=item["title"],
                price=Money.of(item["price"]),
                image=item["image"],
                amount=item["amount"],
            )
            for item in raw
        )

    # --- File helpers ---------------------------------------------------------

    def _read_slots(self) -> dict:
        """Return every slot in the file; an unreadable file counts as empty."""
        try:
            text = self._file_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.warning("Could not read %s: %s", self._file_path, exc)
            return {}
        try:
            slots = json.loads(text)
        except ValueError as exc:
            logger.warning("Ignoring corrupt storage file %s: %s", self._file_path, exc)
            return {}
        if not isinstance(slots, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self._file_path)
            return {}
        return slots

    def _write_atomic(self, text: str) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
