"""Unit of Work: the transaction boundary for every use case.

Handlers open a unit of work, read and save aggregates through its
repositories, and call ``commit()`` once the whole use case has
succeeded. Leaving the ``with`` block without committing (including
leaving it with an exception) discards every staged write, so a failed
use case leaves no partial state behind.

Locks taken with ``lock_client()`` or ``lock_unique()`` are held until
the block exits. A client lock serializes read-modify-write sequences on
one client's balance, cart and orders without blocking other clients;
a unique-key lock serializes inserts that share an email or a book
(name, author).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from types import TracebackType

from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.repository.user_repository import UserRepository


class UnitOfWork(ABC):

    books: BookRepository
    users: UserRepository
    carts: CartRepository
    orders: OrderRepository

    def __enter__(self) -> UnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            self.rollback()
        finally:
            self.release_locks()

    @abstractmethod
    def commit(self) -> None:
        """Make every staged write durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard staged writes. A no-op after ``commit()``."""

    @abstractmethod
    def lock(self, key: Hashable) -> None:
        """Take the exclusive lock for *key*.

        Re-entrant within one unit of work; released on exit.
        """

    def lock_client(self, client_id: int) -> None:
        self.lock(("client", client_id))

    def lock_unique(self, table: str, *parts: str) -> None:
        """Lock a unique key so a check-then-insert cannot race another insert."""
        self.lock((table, *(p.strip().lower() for p in parts)))

    @abstractmethod
    def release_locks(self) -> None:
        """Release every row lock held by this unit of work."""
