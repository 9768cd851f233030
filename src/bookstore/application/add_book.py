"""Application service: Add Book use case."""

from __future__ import annotations

import structlog

from bookstore.application.dto import BookDTO
from bookstore.application.mapping import book_to_dto
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.exceptions import AlreadyExistsError
from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


class AddBookHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, name: str, author: str, price: str) -> BookDTO:
        """Add a new book to the catalog; (name, author) must be unique."""
        book = Book.create(name=name, author=author, price=Money.of(price))

        with self._uow as uow:
            uow.lock_unique("books.ref", book.name, book.author)
            if uow.books.get_by_ref(book.name, book.author) is not None:
                raise AlreadyExistsError(
                    f"Book with name {book.name} and author {book.author} already exists"
                )
            uow.books.save(book)
            uow.commit()

        logger.info("book_added", book_id=book.id, name=book.name, author=book.author)
        return book_to_dto(book)
