"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from bookstore.domain.model.cart import Cart, CartLine
from bookstore.domain.model.value_objects import Quantity
from bookstore.domain.repository.cart_repository import CartRepository
from bookstore.infrastructure.persistence.json_repository import JsonRepository


class JsonCartRepository(JsonRepository[Cart], CartRepository):

    table = "carts"

    # --- CartRepository interface ---------------------------------------------

    def get_by_client(self, client_id: int) -> Cart | None:
        return self._find(lambda raw: raw["client_id"] == client_id)

    def save(self, cart: Cart) -> None:
        self._stage(cart)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": cart.id,
            "client_id": cart.client_id,
            "last_line_id": cart.last_line_id,
            "lines": [
                {
                    "line_id": line.line_id,
                    "book_id": line.book_id,
                    "quantity": line.quantity.value,
                }
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            id=raw["id"],
            client_id=raw["client_id"],
            last_line_id=raw.get("last_line_id", 0),
            lines=[
                CartLine(
                    line_id=line["line_id"],
                    book_id=line["book_id"],
                    quantity=Quantity(line["quantity"]),
                )
                for line in raw["lines"]
            ],
        )
