"""Domain service: Account Ledger.

The ledger is the only code allowed to change a client's balance. Both
mutators validate first and mutate second, so a rejected debit leaves
the balance exactly as it was.

Callers are expected to hold the client's row lock (see UnitOfWork) for
the whole read-check-write sequence.
"""

from __future__ import annotations

import structlog

from bookstore.domain.exceptions import (
    EntityNotFoundError,
    InsufficientFundsError,
    ValidationError,
)
from bookstore.domain.model.user import User
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class AccountLedger:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def balance_of(self, client_id: int) -> Money:
        return self._load_client(client_id).balance

    def debit(self, client_id: int, amount: Money) -> Money:
        """Withdraw *amount* from the client's balance.

        Raises InsufficientFundsError if the balance would go negative.
        Returns the new balance.
        """
        self._assert_non_negative(amount)
        client = self._load_client(client_id)
        details = client.client_details()

        if not details.balance.covers(amount):
            raise InsufficientFundsError(
                f"Not enough balance for client {client.email} "
                f"(need {amount}, have {details.balance})"
            )

        details.balance = details.balance - amount
        self._user_repo.save(client)
        logger.debug(
            "ledger_debit",
            client_id=client_id,
            amount=str(amount.amount),
            balance=str(details.balance.amount),
        )
        return details.balance

    def credit(self, client_id: int, amount: Money) -> Money:
        """Deposit *amount* into the client's balance. No upper bound."""
        self._assert_non_negative(amount)
        client = self._load_client(client_id)
        details = client.client_details()

        details.balance = details.balance + amount
        self._user_repo.save(client)
        logger.debug(
            "ledger_credit",
            client_id=client_id,
            amount=str(amount.amount),
            balance=str(details.balance.amount),
        )
        return details.balance

    # --- Internal helpers -----------------------------------------------------

    def _load_client(self, client_id: int) -> User:
        client = self._user_repo.get_by_id(client_id)
        if client is None or not client.is_client:
            raise EntityNotFoundError(f"Client #{client_id} not found")
        return client

    @staticmethod
    def _assert_non_negative(amount: Money) -> None:
        # Money cannot be negative.
        if not isinstance(amount, Money):
            raise ValidationError(
                f"Ledger amount must be Money, got {type(amount).__name__}"
            )
