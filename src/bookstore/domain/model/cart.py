"""Cart aggregate: a client's mutable working set of books.

The cart is loaded, mutated in memory and saved back as a whole. Line
ids are allocated from a per-cart counter so a removed line's id is never
handed out again.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bookstore.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    line_id: int
    book_id: int
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a client's cart.

    Invariants:
    - at most one line per distinct book
    - every line quantity is >= 1
    """

    id: int | None
    client_id: int
    lines: list[CartLine] = field(default_factory=list)
    last_line_id: int = 0

    @staticmethod
    def for_client(client_id: int) -> Cart:
        return Cart(id=None, client_id=client_id)

    # --- Mutations ------------------------------------------------------------

    def add_book(self, book_id: int, quantity: int = 1) -> CartLine:
        """Add *quantity* copies of a book, merging into an existing line."""
        qty = Quantity(quantity)
        line = self._find_by_book(book_id)
        if line is not None:
            line.quantity = line.quantity + qty
            return line

        self.last_line_id += 1
        line = CartLine(line_id=self.last_line_id, book_id=book_id, quantity=qty)
        self.lines.append(line)
        return line

    def set_quantity(self, line_id: int, quantity: int) -> None:
        """Overwrite a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_line(line_id)
            return
        line = self.find_line(line_id)
        if line is not None:
            line.quantity = Quantity(quantity)

    def remove_line(self, line_id: int) -> None:
        self.lines = [line for line in self.lines if line.line_id != line_id]

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    def find_line(self, line_id: int) -> CartLine | None:
        for line in self.lines:
            if line.line_id == line_id:
                return line
        return None

    def _find_by_book(self, book_id: int) -> CartLine | None:
        for line in self.lines:
            if line.book_id == book_id:
                return line
        return None
