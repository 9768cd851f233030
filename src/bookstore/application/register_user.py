"""Application service: Register Client / Register Employee use cases.

Clients and employees share the email namespace: an address registered
for one role cannot be reused for the other.
"""

from __future__ import annotations

from datetime import date

import structlog

from bookstore.application.dto import UserDTO
from bookstore.application.mapping import user_to_dto
from bookstore.application.unit_of_work import UnitOfWork
from bookstore.domain.exceptions import AlreadyExistsError
from bookstore.domain.model.user import User
from bookstore.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)


def _register(uow: UnitOfWork, user: User) -> UserDTO:
    with uow:
        uow.lock_unique("users.email", user.email)
        if uow.users.get_by_email(user.email) is not None:
            raise AlreadyExistsError(f"User with email {user.email} already exists")
        uow.users.save(user)
        uow.commit()

    logger.info("user_registered", user_id=user.id, authority=user.authority)
    return user_to_dto(user)


class RegisterClientHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, email: str, name: str, opening_balance: str = "0") -> UserDTO:
        user = User.new_client(email, name, opening_balance=Money.of(opening_balance))
        return _register(self._uow, user)


class RegisterEmployeeHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(
        self,
        email: str,
        name: str,
        phone: str,
        birth_date: date | None = None,
    ) -> UserDTO:
        user = User.new_employee(email, name, phone, birth_date=birth_date)
        return _register(self._uow, user)
