"""Application services: Cart Manager use cases.

Every operation is a read-modify-write of the whole Cart aggregate,
performed under the owning client's row lock so it cannot interleave
with a concurrent checkout or another cart edit for the same client.
"""

from __future__ import annotations

import structlog

from bookstore.application.dto import CartDTO
from bookstore.application.lookups import require_client
from bookstore.application.mapping import cart_to_dto
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.cart import Cart
from bookstore.domain.model.user import User

logger = structlog.get_logger(__name__)


def load_cart_for_update(uow: UnitOfWork, client_email: str) -> tuple[User, Cart]:
    """Resolve the client, lock it, and return its cart (created if missing).

    A newly created cart is saved right away so it exists once the unit
    of work commits, even if the caller changes nothing else.
    """
    client = require_client(uow.users, client_email)
    uow.lock_client(client.id)  # type: ignore[arg-type]

    cart = uow.carts.get_by_client(client.id)  # type: ignore[arg-type]
    if cart is None:
        cart = Cart.for_client(client.id)  # type: ignore[arg-type]
        uow.carts.save(cart)
        logger.debug("cart_created", client_id=client.id)
    return client, cart


class GetCartHandler:
    """``get_or_create_cart``: return the client's cart, creating it lazily."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_email: str) -> CartDTO:
        with self._uow as uow:
            client, cart = load_cart_for_update(uow, client_email)
            dto = cart_to_dto(cart, client.email, uow.books)
            uow.commit()
        return dto


class AddToCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        client_email: str,
        book_name: str,
        book_author: str,
        quantity: int = 1,
    ) -> CartDTO:
        """Add a book by (name, author); repeated adds merge into one line."""
        with self._uow as uow:
            client, cart = load_cart_for_update(uow, client_email)

            book = uow.books.get_by_ref(book_name, book_author)
            if book is None:
                raise EntityNotFoundError(
                    f"Book with name {book_name} and author {book_author} not found"
                )

            line = cart.add_book(book.id, quantity)  # type: ignore[arg-type]
            uow.carts.save(cart)
            dto = cart_to_dto(cart, client.email, uow.books)
            uow.commit()

        logger.info(
            "cart_line_added",
            client_id=client.id,
            book_id=book.id,
            line_id=line.line_id,
            quantity=line.quantity.value,
        )
        return dto


class SetCartQuantityHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_email: str, line_id: int, quantity: int) -> CartDTO:
        """Overwrite a line's quantity; ``quantity <= 0`` removes the line.

        An unknown line id leaves the cart unchanged.
        """
        with self._uow as uow:
            client, cart = load_cart_for_update(uow, client_email)
            cart.set_quantity(line_id, quantity)
            uow.carts.save(cart)
            dto = cart_to_dto(cart, client.email, uow.books)
            uow.commit()
        return dto


class RemoveCartLineHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_email: str, line_id: int) -> CartDTO:
        """Remove a line if present. Idempotent."""
        with self._uow as uow:
            client, cart = load_cart_for_update(uow, client_email)
            cart.remove_line(line_id)
            uow.carts.save(cart)
            dto = cart_to_dto(cart, client.email, uow.books)
            uow.commit()
        return dto


class ClearCartHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, client_email: str) -> CartDTO:
        with self._uow as uow:
            client, cart = load_cart_for_update(uow, client_email)
            cart.clear()
            uow.carts.save(cart)
            dto = cart_to_dto(cart, client.email, uow.books)
            uow.commit()
        return dto
