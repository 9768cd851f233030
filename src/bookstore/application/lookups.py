"""Resolve actors and orders, turning a missing row into EntityNotFoundError."""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.order import ActorRef, Order
from bookstore.domain.model.user import User
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.repository.user_repository import UserRepository


def require_client(users: UserRepository, email: str) -> User:
    user = users.get_by_email(email)
    if user is None or not user.is_client:
        raise EntityNotFoundError(f"Client with email {email} not found")
    return user


def require_employee(users: UserRepository, email: str) -> User:
    user = users.get_by_email(email)
    if user is None or not user.is_employee:
        raise EntityNotFoundError(f"Employee with email {email} not found")
    return user


def require_order(orders: OrderRepository, order_id: int) -> Order:
    order = orders.get_by_id(order_id)
    if order is None:
        raise EntityNotFoundError(f"Order #{order_id} not found")
    return order


def actor_ref(user: User) -> ActorRef:
    return ActorRef(id=user.id, email=user.email)  # type: ignore[arg-type]
