"""Domain -> DTO mapping shared by the command and query handlers."""

from __future__ import annotations

from bookstore.application.dto import (
    BookDTO,
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderLineDTO,
    UserDTO,
)
from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.book import Book
from bookstore.domain.model.cart import Cart
from bookstore.domain.model.order import Order
from bookstore.domain.model.user import User
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository


def book_to_dto(book: Book) -> BookDTO:
    return BookDTO(
        id=book.id,  # type: ignore[arg-type]
        name=book.name,
        author=book.author,
        price=str(book.price),
    )


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,  # type: ignore[arg-type]
        email=user.email,
        name=user.name,
        authority=user.authority,
        balance=str(user.balance) if user.is_client else None,
    )


def cart_to_dto(cart: Cart, client_email: str, books: BookRepository) -> CartDTO:
    lines: list[CartLineDTO] = []
    total = Money.zero()
    for line in cart.lines:
        book = books.get_by_id(line.book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{line.book_id} not found")
        line_total = book.price * line.quantity.value
        total = total + line_total
        lines.append(
            CartLineDTO(
                line_id=line.line_id,
                book_name=book.name,
                book_author=book.author,
                quantity=line.quantity.value,
                unit_price=str(book.price),
                line_total=str(line_total),
            )
        )
    return CartDTO(
        client_email=client_email,
        lines=lines,
        item_count=cart.item_count,
        total=str(total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        client_email=order.client.email,
        employee_email=order.employee.email if order.employee else None,
        status=order.status.value,
        lines=[
            OrderLineDTO(
                book_name=line.book_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        price=str(order.price),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
