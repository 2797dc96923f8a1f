"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation

import click

from storefront.application.convert_cart import ConvertCartHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.delete_order import DeleteOrderHandler
from storefront.application.dto import OrderView
from storefront.application.order_queries import OrderQueryHandler
from storefront.application.update_order import UpdateShippingHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work
from storefront.infrastructure.config import get_settings

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _queries() -> OrderQueryHandler:
    return OrderQueryHandler(unit_of_work(), recent_limit=get_settings().recent_orders_limit)


def _parse_amount(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        value = None
    if value is None or not value.is_finite():
        raise click.BadParameter(f"Invalid amount '{raw}'.", param_hint="--min-amount")
    return value


def _display_order(view: OrderView) -> None:
    """Shared formatting for displaying an order."""
    customer = view.user.username if view.user else "(unknown user)"
    destination = ", ".join(
        part
        for part in (
            view.shipping_address,
            view.shipping_city,
            view.shipping_zip_code,
            view.shipping_country,
        )
        if part
    )
    click.echo(f"Order #{view.id}  ({view.order_date})")
    click.echo(f"Customer: {customer}")
    click.echo(f"Ship to:  {destination or '-'}")
    click.echo(f"Created:  {view.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in view.items:
        click.echo(
            f"  {item.product.name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {view.total_amount:>20}")


def _display_summaries(views: list[OrderView]) -> None:
    if not views:
        click.echo("No orders found.")
        return
    click.echo(f"{'ID':<6} {'Date':<12} {'Customer':<16} {'Lines':>5} {'Total':>12}")
    click.echo("-" * 55)
    for view in views:
        customer = view.user.username if view.user else "-"
        click.echo(
            f"{view.id:<6} {view.order_date:<12} {customer:<16} "
            f"{len(view.items):>5} {view.total_amount:>12}"
        )


@click.command("checkout")
@click.option("--cart-id", required=True, type=int, help="Cart to convert.")
@click.option("--address", required=True, help="Shipping street address.")
@click.option("--city", required=True, help="Shipping city.")
@click.option("--zip-code", required=True, help="Shipping zip code.")
@click.option("--country", required=True, help="Shipping country.")
def order_checkout(cart_id: int, address: str, city: str, zip_code: str, country: str) -> None:
    """Convert an active cart into an order (withdraws stock)."""
    handler = ConvertCartHandler(unit_of_work())

    try:
        order = handler.handle(cart_id, address, city, zip_code, country)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart #{cart_id} checked out.")
    _display_order(_queries().by_id(order.id))  # type: ignore[arg-type]


@click.command("create")
@click.option("--user-id", required=True, type=int, help="User placing the order.")
def order_create(user_id: int) -> None:
    """Create an empty order shipping to the user's address."""
    handler = CreateOrderHandler(unit_of_work())

    try:
        order = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order.id} created for user #{user_id}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    try:
        view = _queries().by_id(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(view)


@click.command("list")
@click.option("--email", default=None, help="Orders of the user with this email.")
@click.option("--user-id", type=int, default=None, help="Orders of this user.")
@click.option("--start", type=_DATE, default=None, help="Earliest order date (YYYY-MM-DD).")
@click.option("--end", type=_DATE, default=None, help="Latest order date (YYYY-MM-DD).")
@click.option("--min-amount", default=None, help="Minimum order total.")
def order_list(
    email: str | None,
    user_id: int | None,
    start: datetime | None,
    end: datetime | None,
    min_amount: str | None,
) -> None:
    """List orders, optionally filtered."""
    queries = _queries()

    if email is not None:
        if user_id is not None or start or end or min_amount is not None:
            raise click.UsageError("--email cannot be combined with other filters")
        views = queries.by_user_email(email)
    elif start and end and user_id is None and min_amount is None:
        views = queries.by_date_range(start.date(), end.date())
    else:
        views = queries.by_filters(
            user_id=user_id,
            start=start.date() if start else None,
            end=end.date() if end else None,
            min_amount=_parse_amount(min_amount),
        )

    _display_summaries(views)


@click.command("recent")
@click.option("--limit", type=int, default=None, help="How many orders (default from settings).")
def order_recent(limit: int | None) -> None:
    """Show the most recently created orders."""
    _display_summaries(_queries().most_recent(limit))


@click.command("revenue")
@click.option("--start", type=_DATE, required=True, help="First day (YYYY-MM-DD).")
@click.option("--end", type=_DATE, required=True, help="Last day (YYYY-MM-DD).")
def order_revenue(start: datetime, end: datetime) -> None:
    """Show order revenue per day."""
    lines = _queries().revenue_by_date(start.date(), end.date())

    if not lines:
        click.echo("No orders in range.")
        return

    click.echo(f"{'Date':<12} {'Revenue':>14}")
    click.echo("-" * 27)
    for line in lines:
        click.echo(f"{line.order_date:<12} {line.total:>14}")


@click.command("update-shipping")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--address", default=None)
@click.option("--city", default=None)
@click.option("--zip-code", default=None)
@click.option("--country", default=None)
def order_update_shipping(
    order_id: int,
    address: str | None,
    city: str | None,
    zip_code: str | None,
    country: str | None,
) -> None:
    """Change the shipping destination of an order."""
    handler = UpdateShippingHandler(unit_of_work())

    try:
        order = handler.handle(order_id, address=address, city=city, zip_code=zip_code, country=country)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} now ships to {order.shipping}")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order and its items."""
    handler = DeleteOrderHandler(unit_of_work())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")
