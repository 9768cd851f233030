from __future__ import annotations

from pathlib import Path

import click

from bookstore.config import Settings
from bookstore.infrastructure.cli.book_commands import book_add, book_list
from bookstore.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from bookstore.infrastructure.cli.order_commands import (
    order_confirm,
    order_decline,
    order_list,
    order_pending,
    order_place,
    order_show,
)
from bookstore.infrastructure.cli.user_commands import client_add, client_show, employee_add
from bookstore.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON data files (env: BOOKSTORE_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Bookstore: catalog, carts, checkout and order review"""
    settings = Settings.from_env().with_data_dir(data_dir)
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = settings


@cli.group()
def book() -> None:
    """Manage the catalog."""


@cli.group()
def client() -> None:
    """Manage clients."""


@cli.group()
def employee() -> None:
    """Manage employees."""


@cli.group()
def cart() -> None:
    """Manage a client's cart."""


@cli.group()
def order() -> None:
    """Place and review orders."""


# Register subcommands
book.add_command(book_add)
book.add_command(book_list)
client.add_command(client_add)
client.add_command(client_show)
employee.add_command(employee_add)
cart.add_command(cart_show)
cart.add_command(cart_add)
cart.add_command(cart_set)
cart.add_command(cart_remove)
cart.add_command(cart_clear)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_pending)
order.add_command(order_confirm)
order.add_command(order_decline)
