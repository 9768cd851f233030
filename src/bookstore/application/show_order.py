"""Application service: Show Order use case (query)."""

from __future__ import annotations

from bookstore.application.dto import OrderDTO
from bookstore.application.lookups import require_order
from bookstore.application.mapping import order_to_dto
from bookstore.application.unit_of_work import UnitOfWork


class ShowOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, order_id: int) -> OrderDTO:
        with self._uow as uow:
            order = require_order(uow.orders, order_id)
        return order_to_dto(order)
