"""Book aggregate.

Books live independently of orders. Orders copy a book's name and price
into their own lines at checkout, so later catalog edits never reach an
existing order.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.value_objects import Money


@dataclass
class Book:
    """A book in the catalog, unique by (name, author)."""

    id: int | None
    name: str
    author: str
    price: Money

    @staticmethod
    def create(name: str, author: str, price: Money) -> Book:
        if not name or not name.strip():
            raise ValidationError("Book name is required")
        if not author or not author.strip():
            raise ValidationError("Book author is required")
        return Book(id=None, name=name.strip(), author=author.strip(), price=price)

    def matches(self, name: str, author: str) -> bool:
        """Case-insensitive match on the (name, author) key."""
        return (
            self.name.lower() == name.strip().lower()
            and self.author.lower() == author.strip().lower()
        )
