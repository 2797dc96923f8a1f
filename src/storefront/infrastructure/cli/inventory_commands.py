"""CLI commands for stock levels."""

from __future__ import annotations

import click

from storefront.application.set_inventory import SetInventoryHandler
from storefront.application.show_inventory import ShowInventoryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.config import get_settings


@click.command("set")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
def inventory_set(product_id: str, quantity: int) -> None:
    """Set the stock count of a product."""
    handler = SetInventoryHandler(unit_of_work())

    try:
        product = handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Stock for '{product.name}' set to {product.quantity}")


@click.command("show")
@click.option("--low-stock", "threshold", type=int, default=None,
              help="Only show products with fewer units than this.")
def inventory_show(threshold: int | None) -> None:
    """Show current stock levels."""
    handler = ShowInventoryHandler(
        unit_of_work(), low_stock_threshold=get_settings().low_stock_threshold
    )
    lines = handler.handle(low_stock_threshold=threshold, only_low_stock=threshold is not None)

    if not lines:
        click.echo("No inventory records found.")
        return

    click.echo(f"{'ID':<6} {'Product':<20} {'Stock':>7}  Status")
    click.echo("-" * 46)
    for line in lines:
        status = "OUT" if line.out_of_stock else "LOW" if line.low_stock else ""
        click.echo(f"{line.product_id:<6} {line.product_name:<20} {line.quantity:>7}  {status}")
