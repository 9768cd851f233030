"""User identity and role-specific details.

Clients and employees share one identity record (id, email, name) and
differ only in the details they carry. The role enum drives dispatch,
e.g. the authority string handed to an access layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.value_objects import Money


class Role(Enum):
    CLIENT = "CLIENT"
    EMPLOYEE = "EMPLOYEE"


@dataclass
class ClientDetails:
    """Client-only attributes.

    ``balance`` is changed exclusively by the AccountLedger domain service.
    """

    balance: Money = field(default_factory=Money.zero)


@dataclass
class EmployeeDetails:
    phone: str
    birth_date: date | None = None


@dataclass
class User:
    id: int | None
    email: str
    name: str
    role: Role
    details: ClientDetails | EmployeeDetails

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def new_client(email: str, name: str, opening_balance: Money | None = None) -> User:
        email, name = _validate_identity(email, name)
        return User(
            id=None,
            email=email,
            name=name,
            role=Role.CLIENT,
            details=ClientDetails(balance=opening_balance or Money.zero()),
        )

    @staticmethod
    def new_employee(
        email: str, name: str, phone: str, birth_date: date | None = None
    ) -> User:
        email, name = _validate_identity(email, name)
        if not phone or not phone.strip():
            raise ValidationError("Employee phone is required")
        return User(
            id=None,
            email=email,
            name=name,
            role=Role.EMPLOYEE,
            details=EmployeeDetails(phone=phone.strip(), birth_date=birth_date),
        )

    # --- Role helpers ---------------------------------------------------------

    @property
    def authority(self) -> str:
        return f"ROLE_{self.role.value}"

    @property
    def is_client(self) -> bool:
        return self.role is Role.CLIENT

    @property
    def is_employee(self) -> bool:
        return self.role is Role.EMPLOYEE

    @property
    def balance(self) -> Money:
        return self.client_details().balance

    def client_details(self) -> ClientDetails:
        if not isinstance(self.details, ClientDetails):
            raise EntityNotFoundError(f"Client with email {self.email} not found")
        return self.details


def _validate_identity(email: str, name: str) -> tuple[str, str]:
    if not email or "@" not in email:
        raise ValidationError(f"Invalid email: {email!r}")
    if not name or not name.strip():
        raise ValidationError("Name is required")
    return email.strip().lower(), name.strip()
