"""CLI commands for the shopping cart."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

import click

from shopcart.application.cart_store import CartStore
from shopcart.application.dto import CartDTO
from shopcart.application.outcome import Ignored, Outcome
from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.config import Settings


def _run(settings: Settings, action: Callable[[CartStore], Awaitable[Outcome]]) -> Outcome:
    """Build a store, run one operation against it and close the client."""

    async def main() -> Outcome:
        async with bootstrap.inventory_client(settings) as client:
            store = bootstrap.cart_store(settings, client)
            return await action(store)

    return asyncio.run(main())


def _finish(outcome: Outcome) -> None:
    _display_cart(CartDTO.from_cart(outcome.cart))
    if isinstance(outcome, Ignored):
        click.echo("Nothing to do.")
    elif not outcome.ok:
        # The notification sink has already told the user why.
        raise click.ClickException(f"{outcome.operation.value} did not complete")


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<30} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<6} {item.title[:30]:<30} {item.amount:>5} {item.price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"  {'Total':<42} {dto.item_count:>5} {dto.total:>21}")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the items currently in the cart."""
    repo = bootstrap.cart_repository(settings)
    _display_cart(CartDTO.from_cart(repo.load()))


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_add(settings: Settings, product_id: int) -> None:
    """Add one unit of a product to the cart."""
    _finish(_run(settings, lambda store: store.add_product(product_id)))


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: int) -> None:
    """Remove a product from the cart."""
    _finish(_run(settings, lambda store: store.remove_product(product_id)))


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="New quantity.")
@click.pass_obj
def cart_update(settings: Settings, product_id: int, amount: int) -> None:
    """Set the quantity of a product already in the cart."""
    _finish(_run(settings, lambda store: store.update_product_amount(product_id, amount)))
