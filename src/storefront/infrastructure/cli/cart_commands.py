"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from storefront.application.manage_cart import (
    AddCartItemHandler,
    OpenCartHandler,
    RemoveCartItemHandler,
    ShowCartHandler,
    to_cart_view,
)
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


def _display_cart(view) -> None:
    state = "active" if view.active else "checked out"
    click.echo(f"Cart #{view.id}  (user #{view.user_id}, {state})")
    if not view.items:
        click.echo("  (empty)")
        return
    click.echo(f"  {'Product':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*38}")
    for item in view.items:
        click.echo(
            f"  {item.product_id:<10} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*38}")
    click.echo(f"  {'Cart Total':<27} {view.total:>10}")


@click.command("open")
@click.option("--user-id", required=True, type=int, help="Owner of the cart.")
def cart_open(user_id: int) -> None:
    """Open an empty cart for a user."""
    handler = OpenCartHandler(unit_of_work())

    try:
        cart = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart.id} opened for user #{user_id}")


@click.command("add")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product-id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def cart_add(cart_id: int, product_id: str, quantity: int) -> None:
    """Add a product to a cart at its current price."""
    handler = AddCartItemHandler(unit_of_work())

    try:
        cart = handler.handle(cart_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(to_cart_view(cart))


@click.command("remove")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
@click.option("--product-id", required=True, help="Product ID.")
def cart_remove(cart_id: int, product_id: str) -> None:
    """Remove a product line from a cart."""
    handler = RemoveCartItemHandler(unit_of_work())

    try:
        cart = handler.handle(cart_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(to_cart_view(cart))


@click.command("show")
@click.option("--id", "cart_id", required=True, type=int, help="Cart ID.")
def cart_show(cart_id: int) -> None:
    """Show a cart and its lines."""
    handler = ShowCartHandler(unit_of_work())

    try:
        view = handler.handle(cart_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(view)
