"""Unit tests for the AccountLedger domain service."""

from decimal import Decimal

import pytest

from bookstore.domain.exceptions import (
    EntityNotFoundError,
    InsufficientFundsError,
    ValidationError,
)
from bookstore.domain.model.user import User
from bookstore.domain.model.value_objects import Money
from bookstore.domain.service.account_ledger import AccountLedger
from tests.fakes import FakeUnitOfWork, seed


def _setup(balance: str = "100.00"):
    uow = FakeUnitOfWork()
    client = User.new_client("alice@example.com", "Alice", Money.of(balance))
    employee = User.new_employee("bob@shop.com", "Bob", "+1-555-0100")
    seed(uow, client, employee)
    return uow, client.id, employee.id


class TestDebit:

    def test_debit_reduces_balance(self):
        uow, client_id, _ = _setup("100.00")
        new_balance = AccountLedger(uow.users).debit(client_id, Money.of("60.00"))
        assert new_balance == Money.of("40.00")
        assert uow.users.get_by_id(client_id).balance == Money.of("40.00")

    def test_debit_entire_balance_allowed(self):
        uow, client_id, _ = _setup("25.00")
        assert AccountLedger(uow.users).debit(client_id, Money.of("25.00")) == Money.zero()

    def test_overdraft_rejected_and_balance_untouched(self):
        uow, client_id, _ = _setup("40.00")
        ledger = AccountLedger(uow.users)
        with pytest.raises(InsufficientFundsError, match="Not enough balance"):
            ledger.debit(client_id, Money.of("50.00"))
        assert ledger.balance_of(client_id) == Money.of("40.00")

    def test_non_money_amount_rejected(self):
        uow, client_id, _ = _setup()
        with pytest.raises(ValidationError, match="must be Money"):
            AccountLedger(uow.users).debit(client_id, Decimal("5"))  # type: ignore[arg-type]


class TestCredit:

    def test_credit_increases_balance_without_cap(self):
        uow, client_id, _ = _setup("100.00")
        new_balance = AccountLedger(uow.users).credit(client_id, Money.of("1000000.00"))
        assert new_balance == Money.of("1000100.00")

    def test_credit_zero_is_allowed(self):
        uow, client_id, _ = _setup("10.00")
        assert AccountLedger(uow.users).credit(client_id, Money.zero()) == Money.of("10.00")


class TestResolution:

    def test_unknown_client_rejected(self):
        uow, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AccountLedger(uow.users).credit(999, Money.of("1"))

    def test_employee_has_no_ledger(self):
        uow, _, employee_id = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AccountLedger(uow.users).debit(employee_id, Money.of("1"))
