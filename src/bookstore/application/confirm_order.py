"""Application service: Confirm Order use case.

Moves a PROCESSING order to CONFIRMED and records the deciding
employee. The client's balance is not touched.
"""

from __future__ import annotations

import structlog

from bookstore.application.lookups import actor_ref, require_employee, require_order
from bookstore.application.unit_of_work import UnitOfWork

logger = structlog.get_logger(__name__)


class ConfirmOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int, employee_email: str) -> None:
        with self._uow as uow:
            order = require_order(uow.orders, order_id)
            employee = require_employee(uow.users, employee_email)

            # Status must be checked against the row read under the lock.
            uow.lock_client(order.client.id)
            order = require_order(uow.orders, order_id)

            order.confirm(actor_ref(employee))
            uow.orders.save(order)
            uow.commit()

        logger.info("order_confirmed", order_id=order_id, employee_id=employee.id)
