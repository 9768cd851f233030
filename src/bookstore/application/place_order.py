"""Application service: Place Order use case (checkout).

Turns the client's cart into an immutable, priced Order, paid from the
client's balance. The whole sequence runs in one unit of work under the
client's row lock:

1. Resolve the client and lock it.
2. Resolve the cart; reject an empty one.
3. Snapshot each line at the current book price and sum exactly.
4. Debit the ledger (rejects if the total exceeds the balance).
5. Save the new order, clear and save the cart, commit.

A failure at any step rolls the whole unit of work back.
"""

from __future__ import annotations

import structlog

from bookstore.application.dto import OrderDTO
from bookstore.application.lookups import actor_ref, require_client
from bookstore.application.mapping import order_to_dto
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.exceptions import (
    EmptyCartError,
    EntityNotFoundError,
    InsufficientFundsError,
)
from bookstore.domain.model.cart import Cart
from bookstore.domain.model.order import Order, OrderLine
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.service.account_ledger import AccountLedger

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_email: str) -> OrderDTO:
        with self._uow as uow:
            client = require_client(uow.users, client_email)
            uow.lock_client(client.id)  # type: ignore[arg-type]

            cart = uow.carts.get_by_client(client.id)  # type: ignore[arg-type]
            if cart is None:
                raise EntityNotFoundError(
                    f"Cart associated with email {client.email} not found"
                )
            if cart.is_empty:
                logger.warning("checkout_rejected", client_id=client.id, reason="empty_cart")
                raise EmptyCartError("Cannot create order from empty cart")

            order = Order.place(actor_ref(client), self._snapshot(cart, uow.books))

            ledger = AccountLedger(uow.users)
            try:
                balance = ledger.debit(client.id, order.price)  # type: ignore[arg-type]
            except InsufficientFundsError:
                logger.warning(
                    "checkout_rejected",
                    client_id=client.id,
                    reason="insufficient_funds",
                    total=str(order.price.amount),
                )
                raise

            uow.orders.save(order)
            cart.clear()
            uow.carts.save(cart)
            uow.commit()

        logger.info(
            "order_placed",
            order_id=order.id,
            client_id=client.id,
            total=str(order.price.amount),
            balance=str(balance.amount),
        )
        return order_to_dto(order)

    @staticmethod
    def _snapshot(cart: Cart, books: BookRepository) -> list[OrderLine]:
        lines: list[OrderLine] = []
        for line in cart.lines:
            book = books.get_by_id(line.book_id)
            if book is None:
                raise EntityNotFoundError(f"Book #{line.book_id} not found")
            lines.append(
                OrderLine(
                    book_name=book.name,
                    quantity=line.quantity,
                    unit_price=book.price,  # <-- price snapshot
                )
            )
        return lines
