"""Application service: Show Client use case (query)."""

from __future__ import annotations

from bookstore.application.dto import UserDTO
from bookstore.application.lookups import require_client
from bookstore.application.mapping import user_to_dto
from bookstore.application.unit_of_work import UnitOfWork


class ShowClientHandler:

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def handle(self, email: str) -> UserDTO:
        with self._uow as uow:
            client = require_client(uow.users, email)
        return user_to_dto(client)
