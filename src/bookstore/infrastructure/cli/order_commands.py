"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from bookstore.application.confirm_order import ConfirmOrderHandler
from bookstore.application.decline_order import DeclineOrderHandler
from bookstore.application.dto import OrderDTO, Page, PageRequest
from bookstore.application.list_orders import (
    ORDER_SORT_KEYS,
    ListClientOrdersHandler,
    ListPendingOrdersHandler,
)
from bookstore.application.place_order import PlaceOrderHandler
from bookstore.application.show_order import ShowOrderHandler
from bookstore.config import Settings
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import unit_of_work


def _page_options(f):
    """Search, paging and sorting options shared by the list commands."""
    f = click.option("--asc", is_flag=True, default=False, help="Sort ascending.")(f)
    f = click.option(
        "--sort",
        default="created_at",
        show_default=True,
        type=click.Choice(sorted(ORDER_SORT_KEYS)),
        help="Sort key.",
    )(f)
    f = click.option("--size", default=20, show_default=True, type=int, help="Page size.")(f)
    f = click.option("--page", default=0, show_default=True, type=int, help="Page index (0-based).")(f)
    f = click.option("--search", default=None, help="Match order id, client email or book name.")(f)
    return f


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Client:   {dto.client_email}")
    if dto.employee_email:
        click.echo(f"Employee: {dto.employee_email}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Book':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*56}")
    for line in dto.lines:
        click.echo(
            f"  {line.book_name:<28} {line.quantity:>5} {line.unit_price:>10} {line.line_total:>10}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Order Total':<35} {dto.price:>20}")


def _display_page(page: Page[OrderDTO]) -> None:
    if not page.items:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Created':<22} {'Client':<28} {'Status':<12} {'Total':>10}")
    click.echo("-" * 82)
    for o in page.items:
        click.echo(
            f"{o.id:<6} {o.created_at:<22} {o.client_email:<28} {o.status:<12} {o.price:>10}"
        )
    click.echo(f"Page {page.page + 1} of {page.total_pages} ({page.total_items} orders)")


@click.command("place")
@click.option("--email", required=True, help="Client email.")
@click.pass_obj
def order_place(settings: Settings, email: str) -> None:
    """Check out the client's cart against their balance."""
    handler = PlaceOrderHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed  (status={dto.status}, total={dto.price})")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(settings: Settings, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work(settings.data_dir))

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--email", required=True, help="Client email.")
@_page_options
@click.pass_obj
def order_list(
    settings: Settings,
    email: str,
    search: str | None,
    page: int,
    size: int,
    sort: str,
    asc: bool,
) -> None:
    """List a client's order history."""
    handler = ListClientOrdersHandler(unit_of_work(settings.data_dir))
    request = PageRequest(page=page, size=size, sort=sort, descending=not asc)

    try:
        result = handler.handle(email, search=search, page=request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(result)


@click.command("pending")
@_page_options
@click.pass_obj
def order_pending(
    settings: Settings,
    search: str | None,
    page: int,
    size: int,
    sort: str,
    asc: bool,
) -> None:
    """List orders awaiting confirmation."""
    handler = ListPendingOrdersHandler(unit_of_work(settings.data_dir))
    request = PageRequest(page=page, size=size, sort=sort, descending=not asc)

    try:
        result = handler.handle(search=search, page=request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_page(result)


@click.command("confirm")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to confirm.")
@click.option("--employee", "employee_email", required=True, help="Deciding employee's email.")
@click.pass_obj
def order_confirm(settings: Settings, order_id: int, employee_email: str) -> None:
    """Confirm a pending order."""
    handler = ConfirmOrderHandler(unit_of_work(settings.data_dir))

    try:
        handler.handle(order_id, employee_email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} confirmed.")


@click.command("decline")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to decline.")
@click.option("--employee", "employee_email", required=True, help="Deciding employee's email.")
@click.pass_obj
def order_decline(settings: Settings, order_id: int, employee_email: str) -> None:
    """Decline a pending order (refunds the client)."""
    handler = DeclineOrderHandler(unit_of_work(settings.data_dir))

    try:
        handler.handle(order_id, employee_email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} declined, client refunded.")
