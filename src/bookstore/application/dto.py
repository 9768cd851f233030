"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BookDTO:
    id: int
    name: str
    author: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class UserDTO:
    id: int
    email: str
    name: str
    authority: str
    balance: str | None = None  # clients only


@dataclass(frozen=True)
class CartLineDTO:
    line_id: int
    book_name: str
    book_author: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: a client's cart, priced at current catalog prices."""

    client_email: str
    lines: list[CartLineDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    book_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to clients and employees."""

    id: int
    client_email: str
    employee_email: str | None
    status: str
    lines: list[OrderLineDTO]
    price: str
    created_at: str


@dataclass(frozen=True)
class PageRequest:
    """Input: which slice of a result set to return, and in what order."""

    page: int = 0
    size: int = 20
    sort: str = "created_at"
    descending: bool = True


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    page: int
    size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        if self.total_items == 0:
            return 0
        return (self.total_items + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
