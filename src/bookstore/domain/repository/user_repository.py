"""Abstract repository for User identities (clients and employees)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by ID, or None if not found."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by email (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, assigning an ID to new ones."""
