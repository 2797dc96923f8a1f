import click

from storefront.infrastructure.cli.cart_commands import cart_add, cart_open, cart_remove, cart_show
from storefront.infrastructure.cli.inventory_commands import inventory_set, inventory_show
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_create,
    order_delete,
    order_list,
    order_recent,
    order_revenue,
    order_show,
    order_update_shipping,
)
from storefront.infrastructure.cli.product_commands import product_add, product_list, product_update
from storefront.infrastructure.cli.user_commands import user_add
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override STOREFRONT_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Storefront — carts, inventory and orders"""
    settings = get_settings()
    configure_logging(level=log_level or settings.log_level, json_output=settings.log_json)


@cli.group()
def order() -> None:
    """Check out carts and query orders."""


@cli.group()
def cart() -> None:
    """Manage shopping carts."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def inventory() -> None:
    """Manage stock levels."""


@cli.group()
def user() -> None:
    """Manage users."""


# Register subcommands
order.add_command(order_checkout)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_recent)
order.add_command(order_revenue)
order.add_command(order_show)
order.add_command(order_update_shipping)
cart.add_command(cart_add)
cart.add_command(cart_open)
cart.add_command(cart_remove)
cart.add_command(cart_show)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_update)
inventory.add_command(inventory_set)
inventory.add_command(inventory_show)
user.add_command(user_add)
