"""CLI commands for the catalog."""

from __future__ import annotations

import click

from bookstore.application.add_book import AddBookHandler
from bookstore.application.list_books import ListBooksHandler
from bookstore.config import Settings
from bookstore.domain.exceptions import DomainException
from bookstore.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Book title.")
@click.option("--author", required=True, help="Book author.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.pass_obj
def book_add(settings: Settings, name: str, author: str, price: str) -> None:
    """Add a new book to the catalog."""
    handler = AddBookHandler(unit_of_work(settings.data_dir))

    try:
        book = handler.handle(name=name, author=author, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Book #{book.id} '{book.name}' by {book.author} added at {book.price}")


@click.command("list")
@click.pass_obj
def book_list(settings: Settings) -> None:
    """List all books in the catalog."""
    books = ListBooksHandler(unit_of_work(settings.data_dir)).handle()

    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Author':<20} {'Price':>10}")
    click.echo("-" * 67)
    for b in books:
        click.echo(f"{b.id:<6} {b.name:<28} {b.author:<20} {b.price:>10}")
