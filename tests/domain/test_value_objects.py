"""Unit tests for Money and Quantity."""

from decimal import Decimal

import pytest

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.value_objects import Money, Quantity


class TestMoneyParsing:

    @pytest.mark.parametrize(
        "raw, expected",
        [("25.99", "25.99"), (" 12.5 ", "12.5"), (10, "10"), (Decimal("0.30"), "0.30")],
    )
    def test_of_accepts_user_input(self, raw, expected):
        assert Money.of(raw).amount == Decimal(expected)

    def test_of_keeps_currency(self):
        assert Money.of("3", "EUR").currency == "EUR"

    @pytest.mark.parametrize("raw", ["ten dollars", "", "1,50"])
    def test_of_rejects_garbage(self, raw):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of(raw)

    @pytest.mark.parametrize("raw", ["NaN", "Infinity"])
    def test_non_finite_rejected(self, raw):
        with pytest.raises(ValidationError, match="finite"):
            Money.of(raw)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of("-0.01")

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10.5)  # type: ignore[arg-type]

    def test_zero_is_a_valid_balance(self):
        assert Money.zero().amount == 0

    @pytest.mark.parametrize("raw", ["-0", "-0.00"])
    def test_negative_zero_is_plain_zero(self, raw):
        money = Money.of(raw)
        assert not money.amount.is_signed()
        assert str(money) == "$0.00"


class TestMoneyArithmetic:

    def test_ten_dimes_make_a_dollar(self):
        assert Money.total([Money.of("0.10")] * 10) == Money.of("1.00")

    def test_total_of_nothing_is_zero(self):
        assert Money.total([]) == Money.zero()

    def test_price_times_copies(self):
        assert Money.of("0.10") * 3 == Money.of("0.30")

    @pytest.mark.parametrize("factor", [1.5, True])
    def test_only_int_copies(self, factor):
        with pytest.raises(TypeError):
            Money.of("7.50") * factor

    def test_subtraction(self):
        assert Money.of("100") - Money.of("60") == Money.of("40")

    def test_subtraction_below_zero_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("40") - Money.of("50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money.of("10") + Money.of("5", "EUR")

    def test_ordering(self):
        assert Money.of("5") < Money.of("10") <= Money.of("10.00")
        assert Money.of("10") > Money.of("9.99")

    def test_covers(self):
        balance = Money.of("60.00")
        assert balance.covers(Money.of("60"))
        assert not balance.covers(Money.of("60.01"))

    @pytest.mark.parametrize(
        "raw, shown", [("15", "$15.00"), ("9.5", "$9.50"), ("0.30", "$0.30")]
    )
    def test_str(self, raw, shown):
        assert str(Money.of(raw)) == shown


class TestQuantity:

    @pytest.mark.parametrize("value", [0, -3])
    def test_non_positive_rejected(self, value):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(value)

    @pytest.mark.parametrize("value", [True, 2.0, "2"])
    def test_non_int_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(value)

    def test_merging_lines_adds_quantities(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)
