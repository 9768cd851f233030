"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_by_client(self, client_id: int) -> Cart | None:
        """Return the cart owned by a client, or None if none exists yet."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the whole cart aggregate, assigning an ID to new ones."""
