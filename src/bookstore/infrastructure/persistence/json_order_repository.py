"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from bookstore.domain.model.order import ActorRef, Order, OrderLine, OrderStatus
from bookstore.domain.model.value_objects import Money, Quantity
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.infrastructure.persistence.json_repository import JsonRepository


class JsonOrderRepository(JsonRepository[Order], OrderRepository):

    table = "orders"

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        return self._get(order_id)

    def list_by_client(self, client_id: int) -> list[Order]:
        return self._filter(lambda raw: raw["client"]["id"] == client_id)

    def list_by_status(self, status: OrderStatus) -> list[Order]:
        return self._filter(lambda raw: raw["status"] == status.value)

    def save(self, order: Order) -> None:
        self._stage(order)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "client": {"id": order.client.id, "email": order.client.email},
            "employee": (
                {"id": order.employee.id, "email": order.employee.email}
                if order.employee
                else None
            ),
            "status": order.status.value,
            "price": str(order.price.amount),
            "currency": order.price.currency,
            "created_at": order.created_at.isoformat(),
            "lines": [
                {
                    "book_name": line.book_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        employee = raw.get("employee")
        return Order(
            id=raw["id"],
            client=ActorRef(id=raw["client"]["id"], email=raw["client"]["email"]),
            employee=ActorRef(id=employee["id"], email=employee["email"]) if employee else None,
            lines=[
                OrderLine(
                    book_name=line["book_name"],
                    quantity=Quantity(line["quantity"]),
                    unit_price=Money(Decimal(line["unit_price"]), currency),
                )
                for line in raw["lines"]
            ],
            price=Money(Decimal(raw["price"]), currency),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
