"""Order aggregate: the permanent receipt of a checkout.

The Order owns its lines, which are snapshots of the cart taken at
checkout time. After creation only ``employee`` and ``status`` change,
and only through ``confirm()`` and ``decline()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from bookstore.domain.exceptions import InvalidStateError, ValidationError
from bookstore.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PROCESSING = "PROCESSING"
    CONFIRMED = "CONFIRMED"
    CANCELED = "CANCELED"

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.PROCESSING


@dataclass(frozen=True)
class ActorRef:
    """Reference to the user on either side of an order."""

    id: int
    email: str


@dataclass(frozen=True)
class OrderLine:
    """Detached copy of a cart line: survives catalog edits and deletes."""

    book_name: str
    quantity: Quantity
    unit_price: Money  # locked at checkout

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use ``Order.place()`` for new orders. The ``__init__`` stays simple so
    the repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    client: ActorRef
    lines: list[OrderLine]
    price: Money
    status: OrderStatus = OrderStatus.PROCESSING
    employee: ActorRef | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(client: ActorRef, lines: list[OrderLine]) -> Order:
        """Create a PROCESSING order whose price is the exact sum of its lines."""
        if not lines:
            raise ValidationError("Order must contain at least one line")

        total = Money.total(line.line_total for line in lines)
        return Order(id=None, client=client, lines=list(lines), price=total)

    # --- State transitions ----------------------------------------------------

    def confirm(self, employee: ActorRef) -> None:
        """Transition PROCESSING -> CONFIRMED. No balance effect."""
        self._assert_pending("confirm")
        self.employee = employee
        self.status = OrderStatus.CONFIRMED

    def decline(self, employee: ActorRef) -> None:
        """Transition PROCESSING -> CANCELED.

        The refund of ``price`` to the client must happen in the same
        transaction, via the AccountLedger.
        """
        self._assert_pending("decline")
        self.employee = employee
        self.status = OrderStatus.CANCELED

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match on id, client email and book names."""
        needle = term.strip().lower()
        if not needle:
            return True
        if self.id is not None and needle in str(self.id):
            return True
        if needle in self.client.email.lower():
            return True
        return any(needle in line.book_name.lower() for line in self.lines)

    # --- Internal helpers -----------------------------------------------------

    def _assert_pending(self, action: str) -> None:
        if self.status.is_terminal:
            raise InvalidStateError(
                f"Cannot {action} order #{self.id}: current status is "
                f"{self.status.value}, expected {OrderStatus.PROCESSING.value}"
            )
