"""Integration tests for the Cart Manager use cases."""

import pytest

from bookstore.application.cart import (
    AddToCartHandler,
    ClearCartHandler,
    GetCartHandler,
    RemoveCartLineHandler,
    SetCartQuantityHandler,
)
from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.book import Book
from bookstore.domain.model.user import User
from bookstore.domain.model.value_objects import Money
from tests.fakes import FakeUnitOfWork, seed

ALICE = "alice@example.com"


def _setup() -> FakeUnitOfWork:
    uow = FakeUnitOfWork()
    seed(
        uow,
        User.new_client(ALICE, "Alice", Money.of("100.00")),
        User.new_employee("bob@shop.com", "Bob", "555"),
        Book.create("Dune", "Frank Herbert", Money.of("30.00")),
        Book.create("Emma", "Jane Austen", Money.of("12.50")),
    )
    return uow


class TestGetCart:

    def test_creates_cart_lazily(self):
        uow = _setup()
        assert uow.carts.get_by_client(1) is None

        dto = GetCartHandler(uow).handle(ALICE)

        assert dto.lines == []
        assert dto.total == "$0.00"
        assert uow.carts.get_by_client(1) is not None

    def test_returns_same_cart_on_second_call(self):
        uow = _setup()
        GetCartHandler(uow).handle(ALICE)
        first = uow.carts.get_by_client(1)
        GetCartHandler(uow).handle(ALICE)
        assert uow.carts.get_by_client(1).id == first.id

    def test_unknown_client_rejected(self):
        uow = _setup()
        with pytest.raises(EntityNotFoundError, match="Client with email"):
            GetCartHandler(uow).handle("nobody@example.com")

    def test_employee_has_no_cart(self):
        uow = _setup()
        with pytest.raises(EntityNotFoundError):
            GetCartHandler(uow).handle("bob@shop.com")


class TestAddToCart:

    def test_adding_same_book_twice_merges(self):
        uow = _setup()
        AddToCartHandler(uow).handle(ALICE, "Dune", "Frank Herbert")
        dto = AddToCartHandler(uow).handle(ALICE, "Dune", "Frank Herbert")

        assert len(dto.lines) == 1
        assert dto.lines[0].quantity == 2
        assert dto.total == "$60.00"

    def test_book_lookup_is_case_insensitive(self):
        uow = _setup()
        dto = AddToCartHandler(uow).handle(ALICE, "dune", "FRANK HERBERT")
        assert dto.lines[0].book_name == "Dune"

    def test_cart_prices_lines(self):
        uow = _setup()
        AddToCartHandler(uow).handle(ALICE, "Dune", "Frank Herbert")
        dto = AddToCartHandler(uow).handle(ALICE, "Emma", "Jane Austen", quantity=2)

        assert dto.item_count == 3
        assert dto.total == "$55.00"
        assert [l.line_total for l in dto.lines] == ["$30.00", "$25.00"]

    def test_unknown_book_rejected(self):
        uow = _setup()
        with pytest.raises(EntityNotFoundError, match="Book with name"):
            AddToCartHandler(uow).handle(ALICE, "Dune", "Someone Else")

    def test_non_positive_quantity_rejected(self):
        uow = _setup()
        with pytest.raises(ValidationError):
            AddToCartHandler(uow).handle(ALICE, "Dune", "Frank Herbert", quantity=0)


class TestEditCart:

    def _cart_with_two_lines(self):
        uow = _setup()
        AddToCartHandler(uow).handle(ALICE, "Dune", "Frank Herbert")
        dto = AddToCartHandler(uow).handle(ALICE, "Emma", "Jane Austen")
        return uow, [l.line_id for l in dto.lines]

    def test_set_quantity(self):
        uow, (dune, _) = self._cart_with_two_lines()
        dto = SetCartQuantityHandler(uow).handle(ALICE, dune, 4)
        assert dto.lines[0].quantity == 4

    def test_set_quantity_zero_equals_remove(self):
        uow, (dune, emma) = self._cart_with_two_lines()
        dto = SetCartQuantityHandler(uow).handle(ALICE, dune, 0)
        assert [l.line_id for l in dto.lines] == [emma]

    def test_set_quantity_unknown_line_is_noop(self):
        uow, _ = self._cart_with_two_lines()
        dto = SetCartQuantityHandler(uow).handle(ALICE, 999, 3)
        assert [l.quantity for l in dto.lines] == [1, 1]

    def test_remove_line(self):
        uow, (dune, emma) = self._cart_with_two_lines()
        dto = RemoveCartLineHandler(uow).handle(ALICE, emma)
        assert [l.line_id for l in dto.lines] == [dune]

    def test_remove_unknown_line_is_noop(self):
        uow, lines = self._cart_with_two_lines()
        dto = RemoveCartLineHandler(uow).handle(ALICE, 999)
        assert [l.line_id for l in dto.lines] == lines

    def test_clear(self):
        uow, _ = self._cart_with_two_lines()
        dto = ClearCartHandler(uow).handle(ALICE)
        assert dto.lines == []
        assert uow.carts.get_by_client(1).is_empty
