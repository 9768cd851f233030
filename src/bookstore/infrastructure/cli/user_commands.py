"""CLI commands for clients and employees."""

from __future__ import annotations

from datetime import datetime

import click

from bookstore.application.register_user import (
    RegisterClientHandler,
    RegisterEmployeeHandler,
)
from bookstore.application.show_client import ShowClientHandler
from bookstore.config import Settings
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--email", required=True, help="Client email (login).")
@click.option("--name", required=True, help="Display name.")
@click.option("--balance", default="0", show_default=True, help="Opening balance.")
@click.pass_obj
def client_add(settings: Settings, email: str, name: str, balance: str) -> None:
    """Register a new client."""
    handler = RegisterClientHandler(unit_of_work(settings.data_dir))

    try:
        user = handler.handle(email=email, name=name, opening_balance=balance)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client #{user.id} {user.email} registered (balance={user.balance})")


@click.command("show")
@click.option("--email", required=True, help="Client email.")
@click.pass_obj
def client_show(settings: Settings, email: str) -> None:
    """Show a client and their balance."""
    handler = ShowClientHandler(unit_of_work(settings.data_dir))

    try:
        user = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Client #{user.id}  {user.name} <{user.email}>")
    click.echo(f"Balance: {user.balance}")


@click.command("add")
@click.option("--email", required=True, help="Employee email (login).")
@click.option("--name", required=True, help="Display name.")
@click.option("--phone", required=True, help="Contact phone.")
@click.option(
    "--birth-date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Birth date as YYYY-MM-DD.",
)
@click.pass_obj
def employee_add(
    settings: Settings,
    email: str,
    name: str,
    phone: str,
    birth_date: datetime | None,
) -> None:
    """Register a new employee."""
    handler = RegisterEmployeeHandler(unit_of_work(settings.data_dir))

    try:
        user = handler.handle(
            email=email,
            name=name,
            phone=phone,
            birth_date=birth_date.date() if birth_date else None,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Employee #{user.id} {user.email} registered")
