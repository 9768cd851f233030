"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so callers (the CLI today, a web layer tomorrow) can catch them uniformly
and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidStateError(ValidationError):
    """A state transition was attempted from a state that does not allow it."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class AlreadyExistsError(DomainException):
    """An entity with the same unique key already exists."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""


class InsufficientFundsError(DomainException):
    """The client's balance does not cover the requested amount."""
