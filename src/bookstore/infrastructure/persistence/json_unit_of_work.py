"""JSON-file-backed implementation of UnitOfWork."""

from __future__ import annotations

from collections.abc import Hashable

from bookstore.application.unit_of_work import UnitOfWork
from bookstore.infrastructure.persistence.json_book_repository import JsonBookRepository
from bookstore.infrastructure.persistence.json_cart_repository import JsonCartRepository
from bookstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from bookstore.infrastructure.persistence.json_repository import JsonRepository
from bookstore.infrastructure.persistence.json_store import JsonStore
from bookstore.infrastructure.persistence.json_user_repository import JsonUserRepository


class JsonUnitOfWork(UnitOfWork):
    """One transaction against a JsonStore.

    Not thread-safe: give every concurrent caller its own instance. The
    store and its row locks are what is shared.
    """

    def __init__(self, store: JsonStore) -> None:
        self._store = store
        self.books = JsonBookRepository(store)
        self.users = JsonUserRepository(store)
        self.carts = JsonCartRepository(store)
        self.orders = JsonOrderRepository(store)
        self._held: list[Hashable] = []

    def commit(self) -> None:
        self._store.apply({repo.table: repo.staged_changes() for repo in self._repos})
        for repo in self._repos:
            repo.discard()

    def rollback(self) -> None:
        for repo in self._repos:
            repo.discard()

    def lock(self, key: Hashable) -> None:
        if key in self._held:
            return
        self._store.row_locks.acquire(key)
        self._held.append(key)

    def release_locks(self) -> None:
        while self._held:
            self._store.row_locks.release(self._held.pop())

    @property
    def _repos(self) -> tuple[JsonRepository, ...]:
        return (self.books, self.users, self.carts, self.orders)
