"""Value Objects for prices, balances and copy counts.

Book prices, order totals and client balances are all ``Money``; every
line in a cart or order holds a ``Quantity``. Both are immutable, compare
by value and refuse to exist in an invalid state.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Iterable

from bookstore.domain.exceptions import ValidationError

CENT = Decimal("0.01")


@total_ordering
@dataclass(frozen=True)
class Money:
    """A non-negative Decimal amount in one currency.

    Sums are exact: ``Money.of("0.10") * 3 == Money.of("0.30")``. Rounding
    to cents happens only when the amount is rendered.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )
        if self.amount.is_signed():
            # -0 is zero; store it unsigned so it never renders as $-0.00.
            object.__setattr__(self, "amount", self.amount.copy_abs())

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "USD") -> Money:
        """Parse user input ("12.50", 12, Decimal) into Money."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc
        return Money(value, currency)

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0.00"), currency)

    @staticmethod
    def total(amounts: Iterable[Money], currency: str = "USD") -> Money:
        """Exact sum of *amounts*; ``Money.zero()`` for an empty iterable."""
        result = Money.zero(currency)
        for amount in amounts:
            result = result + amount
        return result

    def __add__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._check_currency(other)
        if other.amount > self.amount:
            raise ValidationError(
                f"Cannot subtract {other} from {self}: negative amount"
            )
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, copies: int) -> Money:
        if isinstance(copies, bool) or not isinstance(copies, int):
            raise TypeError(f"Can only multiply Money by int, got {type(copies).__name__}")
        return Money(self.amount * copies, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def covers(self, other: Money) -> bool:
        """True if this balance is enough to pay *other*."""
        return not self < other

    def __str__(self) -> str:
        return f"${self.amount.quantize(CENT)}"

    def _check_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )


@dataclass(frozen=True)
class Quantity:
    """Number of copies of one book on a cart or order line; at least 1."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError(f"Quantity must be positive, got {self.value}")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)
