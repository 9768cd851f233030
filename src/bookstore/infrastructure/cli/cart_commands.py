"""CLI commands for a client's cart."""

from __future__ import annotations

import click

from bookstore.application.cart import (
    AddToCartHandler,
    ClearCartHandler,
    GetCartHandler,
    RemoveCartLineHandler,
    SetCartQuantityHandler,
)
from bookstore.application.dto import CartDTO
from bookstore.config import Settings
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import unit_of_work

_email_option = click.option("--email", required=True, help="Client email.")


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    click.echo(f"Cart of {dto.client_email}  ({dto.item_count} items)")
    if not dto.lines:
        click.echo("  (empty)")
        return

    click.echo()
    click.echo(f"  {'Line':>4} {'Book':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*61}")
    for line in dto.lines:
        click.echo(
            f"  {line.line_id:>4} {line.book_name:<28} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Cart Total':<40} {dto.total:>20}")


@click.command("show")
@_email_option
@click.pass_obj
def cart_show(settings: Settings, email: str) -> None:
    """Show the cart, creating an empty one on first use."""
    handler = GetCartHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("add")
@_email_option
@click.option("--book", "book_name", required=True, help="Book title.")
@click.option("--author", required=True, help="Book author.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Copies to add.")
@click.pass_obj
def cart_add(settings: Settings, email: str, book_name: str, author: str, quantity: int) -> None:
    """Add a book to the cart (merges with an existing line)."""
    handler = AddToCartHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email, book_name, author, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("set")
@_email_option
@click.option("--line", "line_id", required=True, type=int, help="Cart line ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity; 0 removes.")
@click.pass_obj
def cart_set(settings: Settings, email: str, line_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    handler = SetCartQuantityHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email, line_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@_email_option
@click.option("--line", "line_id", required=True, type=int, help="Cart line ID.")
@click.pass_obj
def cart_remove(settings: Settings, email: str, line_id: int) -> None:
    """Remove a line from the cart."""
    handler = RemoveCartLineHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email, line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@_email_option
@click.pass_obj
def cart_clear(settings: Settings, email: str) -> None:
    """Remove every line from the cart."""
    handler = ClearCartHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)
