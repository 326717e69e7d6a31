"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopcart.application.cart_store import CartStore
from shopcart.domain.gateway.notification_sink import NotificationSink
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.http.inventory_client import HttpInventoryClient
from shopcart.infrastructure.notifications import ConsoleNotificationSink
from shopcart.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(settings.storage_path, settings.storage_key)


def inventory_client(settings: Settings) -> HttpInventoryClient:
    return HttpInventoryClient(settings.api_url, timeout=settings.http_timeout)


def cart_store(
    settings: Settings,
    client: HttpInventoryClient,
    notification_sink: NotificationSink | None = None,
) -> CartStore:
    """Build a CartStore around ``client``; the caller closes the client."""
    return CartStore(
        cart_repository=cart_repository(settings),
        inventory_client=client,
        notification_sink=notification_sink or ConsoleNotificationSink(),
    )
