"""Application service: List Books use case (query)."""

from __future__ import annotations

from bookstore.application.dto import BookDTO
from bookstore.application.mapping import book_to_dto
from bookstore.application.unit_of_work import UnitOfWork


class ListBooksHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self) -> list[BookDTO]:
        with self._uow as uow:
            books = uow.books.list_all()
        return [book_to_dto(b) for b in sorted(books, key=lambda b: b.id or 0)]
