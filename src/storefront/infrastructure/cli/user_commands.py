"""CLI commands for users."""

from __future__ import annotations

import click

from storefront.application.add_user import AddUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--username", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (unique).")
@click.option("--address", default=None, help="Default shipping address.")
def user_add(username: str, email: str, address: str | None) -> None:
    """Register a user."""
    handler = AddUserHandler(unit_of_work())

    try:
        user = handler.handle(username=username, email=email, address=address)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} '{user.username}' <{user.email}> added")
