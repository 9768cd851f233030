"""JSON-file-backed implementation of BookRepository."""

from __future__ import annotations

from decimal import Decimal

from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.infrastructure.persistence.json_repository import JsonRepository


class JsonBookRepository(JsonRepository[Book], BookRepository):

    table = "books"

    # --- BookRepository interface ---------------------------------------------

    def get_by_id(self, book_id: int) -> Book | None:
        return self._get(book_id)

    def get_by_ref(self, name: str, author: str) -> Book | None:
        name, author = name.strip().lower(), author.strip().lower()
        return self._find(
            lambda raw: raw["name"].lower() == name and raw["author"].lower() == author
        )

    def list_all(self) -> list[Book]:
        return self._filter(lambda raw: True)

    def save(self, book: Book) -> None:
        self._stage(book)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(book: Book) -> dict:
        return {
            "id": book.id,
            "name": book.name,
            "author": book.author,
            "price": str(book.price.amount),
            "currency": book.price.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Book:
        return Book(
            id=raw["id"],
            name=raw["name"],
            author=raw["author"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
        )
