"""Abstract repository for the Book aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live
elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.book import Book


class BookRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique book ID."""

    @abstractmethod
    def get_by_id(self, book_id: int) -> Book | None:
        """Return a book by its ID, or None if not found."""

    @abstractmethod
    def get_by_ref(self, name: str, author: str) -> Book | None:
        """Return the book matching (name, author) case-insensitively, or None."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in the catalog."""

    @abstractmethod
    def save(self, book: Book) -> None:
        """Persist a new or updated book, assigning an ID to new ones."""
