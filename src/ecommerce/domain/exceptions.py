"""Domain-level exceptions.

Every rule violation raised by the cart, the value objects or the
concrete collaborators derives from DomainException, so the CLI layer
can turn them into user-facing messages in one place.

A declined payment is NOT an exception: ``PaymentService.charge``
reports it by returning ``False``.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class ConfigurationError(ValidationError):
    """A setting could not be parsed or is out of range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
