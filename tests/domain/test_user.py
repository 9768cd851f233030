"""Unit tests for the User identity model."""

from datetime import date

import pytest

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.user import ClientDetails, EmployeeDetails, Role, User
from bookstore.domain.model.value_objects import Money


class TestClient:

    def test_new_client_defaults_to_zero_balance(self):
        client = User.new_client("Alice@Example.com ", "Alice")
        assert client.email == "alice@example.com"
        assert client.role is Role.CLIENT
        assert client.balance == Money.zero()
        assert isinstance(client.details, ClientDetails)

    def test_authority(self):
        assert User.new_client("a@x.com", "A").authority == "ROLE_CLIENT"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError, match="Invalid email"):
            User.new_client("not-an-email", "Alice")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Name is required"):
            User.new_client("a@x.com", "  ")


class TestEmployee:

    def test_new_employee(self):
        employee = User.new_employee("bob@shop.com", "Bob", "555", date(1990, 5, 1))
        assert employee.role is Role.EMPLOYEE
        assert employee.authority == "ROLE_EMPLOYEE"
        assert employee.details == EmployeeDetails(phone="555", birth_date=date(1990, 5, 1))

    def test_phone_required(self):
        with pytest.raises(ValidationError, match="phone"):
            User.new_employee("bob@shop.com", "Bob", "")

    def test_employee_has_no_balance(self):
        employee = User.new_employee("bob@shop.com", "Bob", "555")
        with pytest.raises(EntityNotFoundError):
            employee.balance
