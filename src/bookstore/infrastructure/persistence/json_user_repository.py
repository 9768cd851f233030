"""JSON-file-backed implementation of UserRepository.

Clients and employees share one table; the ``role`` column selects
which details columns are meaningful.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from bookstore.domain.model.user import ClientDetails, EmployeeDetails, Role, User
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.user_repository import UserRepository
from bookstore.infrastructure.persistence.json_repository import JsonRepository


class JsonUserRepository(JsonRepository[User], UserRepository):

    table = "users"

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: int) -> User | None:
        return self._get(user_id)

    def get_by_email(self, email: str) -> User | None:
        email = email.strip().lower()
        return self._find(lambda raw: raw["email"] == email)

    def list_all(self) -> list[User]:
        return self._filter(lambda raw: True)

    def save(self, user: User) -> None:
        self._stage(user)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        raw = {
            "id": user.id,
            "email": user.email,
            "name": user.name,
            "role": user.role.value,
        }
        if isinstance(user.details, ClientDetails):
            raw["balance"] = str(user.details.balance.amount)
            raw["currency"] = user.details.balance.currency
        else:
            raw["phone"] = user.details.phone
            raw["birth_date"] = (
                user.details.birth_date.isoformat() if user.details.birth_date else None
            )
        return raw

    @staticmethod
    def _to_domain(raw: dict) -> User:
        role = Role(raw["role"])
        details: ClientDetails | EmployeeDetails
        if role is Role.CLIENT:
            details = ClientDetails(
                balance=Money(Decimal(raw["balance"]), raw.get("currency", "USD"))
            )
        else:
            birth_date = raw.get("birth_date")
            details = EmployeeDetails(
                phone=raw["phone"],
                birth_date=date.fromisoformat(birth_date) if birth_date else None,
            )
        return User(
            id=raw["id"],
            email=raw["email"],
            name=raw["name"],
            role=role,
            details=details,
        )
