import click

from shopcart.domain.exceptions import DomainException
from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.logging import configure_logging


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """shopcart: stock-checked shopping cart"""
    try:
        settings = Settings.from_env()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)
    ctx.obj = settings


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
