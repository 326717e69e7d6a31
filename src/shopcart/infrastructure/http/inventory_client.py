"""httpx-backed implementation of InventoryClient.

Talks to a json-server style API:

    GET /stock/{id}     -> {"id": 1, "amount": 3}
    GET /products/{id}  -> {"id": 1, "title": "...", "price": 179.9, "image": "..."}
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from shopcart.domain.exceptions import DomainException, InventoryUnavailableError
from shopcart.domain.gateway.inventory_client import InventoryClient, ensure_matches
from shopcart.domain.model.product import ProductDetails
from shopcart.domain.model.stock import StockRecord
from shopcart.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class HttpInventoryClient(InventoryClient):

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0)),
        )

    async def __aenter__(self) -> HttpInventoryClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http_client.aclose()

    # --- InventoryClient interface --------------------------------------------

    async def get_stock(self, product_id: int) -> StockRecord:
        raw = await self._get_json(f"/stock/{product_id}")
        try:
            stock = StockRecord(id=_as_int(raw["id"]), amount=_as_int(raw["amount"]))
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise InventoryUnavailableError(
                f"Malformed stock payload for product #{product_id}: {raw!r}"
            ) from exc
        ensure_matches(product_id, stock)
        return stock

    async def get_product(self, product_id: int) -> ProductDetails:
        raw = await self._get_json(f"/products/{product_id}")
        try:
            details = ProductDetails(
                id=_as_int(raw["id"]),
                title=raw["title"],
                price=Money.of(raw["price"]),
                image=raw["image"],
            )
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise InventoryUnavailableError(
                f"Malformed product payload for product #{product_id}: {raw!r}"
            ) from exc
        ensure_matches(product_id, details)
        return details

    # --- HTTP helpers ---------------------------------------------------------

    async def _get_json(self, path: str) -> dict[str, Any]:
        try:
            response = await self._http_client.get(f"{self._base_url}{path}")
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise InventoryUnavailableError(
                f"GET {path} returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise InventoryUnavailableError(f"GET {path} failed: {exc}") from exc
        except ValueError as exc:
            raise InventoryUnavailableError(f"GET {path} returned invalid JSON") from exc

        if not isinstance(payload, dict):
            raise InventoryUnavailableError(
                f"GET {path} returned {type(payload).__name__}, expected an object"
            )
        logger.debug("GET %s -> %s", path, payload)
        return payload


def _as_int(value: Any) -> int:
    """Accept JSON integers only (``true`` and ``1.5`` are rejected)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {value!r}")
    return value
