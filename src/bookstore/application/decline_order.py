"""Application service: Decline Order use case.

A compensating transaction: the order's full price goes back to the
client through the AccountLedger, whatever the client's balance is now,
and the order becomes CANCELED with the deciding employee recorded.
Refund and status change commit together or not at all.
"""

from __future__ import annotations

import structlog

from bookstore.application.lookups import actor_ref, require_employee, require_order
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.service.account_ledger import AccountLedger

logger = structlog.get_logger(__name__)


class DeclineOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, employee_email: str) -> None:
        with self._uow as uow:
            order = require_order(uow.orders, order_id)
            employee = require_employee(uow.users, employee_email)

            uow.lock_client(order.client.id)
            order = require_order(uow.orders, order_id)

            # Transition first: a terminal order must not be refunded twice.
            order.decline(actor_ref(employee))
            balance = AccountLedger(uow.users).credit(order.client.id, order.price)
            uow.orders.save(order)
            uow.commit()

        logger.info(
            "order_declined",
            order_id=order_id,
            employee_id=employee.id,
            refunded=str(order.price.amount),
            balance=str(balance.amount),
        )
