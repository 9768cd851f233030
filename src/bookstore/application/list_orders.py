"""Application services: order history and pending-order queries.

Both are read-only. The optional search term is matched
case-insensitively against the order id, the client email and the
book names on the order's lines.
"""

from __future__ import annotations

from bookstore.application.dto import OrderDTO, Page, PageRequest
from bookstore.application.lookups import require_client
from bookstore.application.mapping import order_to_dto
from bookstore.application.pagination import paginate
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.model.order import Order, OrderStatus

ORDER_SORT_KEYS = {
    "id": lambda o: o.id,
    "created_at": lambda o: o.created_at,
    "price": lambda o: o.price.amount,
    "status": lambda o: o.status.value,
}


def _to_page(orders: list[Order], search: str | None, page: PageRequest) -> Page[OrderDTO]:
    if search and search.strip():
        orders = [o for o in orders if o.matches(search)]
    result = paginate(orders, page, ORDER_SORT_KEYS, tiebreak=lambda o: o.id)
    return Page(
        items=[order_to_dto(o) for o in result.items],
        page=result.page,
        size=result.size,
        total_items=result.total_items,
    )


class ListClientOrdersHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        client_email: str,
        search: str | None = None,
        page: PageRequest | None = None,
    ) -> Page[OrderDTO]:
        with self._uow as uow:
            client = require_client(uow.users, client_email)
            orders = uow.orders.list_by_client(client.id)  # type: ignore[arg-type]
        return _to_page(orders, search, page or PageRequest())


class ListPendingOrdersHandler:
    """Orders awaiting an employee decision (status PROCESSING)."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        search: str | None = None,
        page: PageRequest | None = None,
    ) -> Page[OrderDTO]:
        with self._uow as uow:
            orders = uow.orders.list_by_status(OrderStatus.PROCESSING)
        return _to_page(orders, search, page or PageRequest())
