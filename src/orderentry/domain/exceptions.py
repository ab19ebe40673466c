"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """One or more business rules were violated.

    Every violated rule is kept in ``reasons``; the message is the
    reasons joined by ", " in the order they were recorded.
    """

    def __init__(self, *reasons: str) -> None:
        self.reasons = list(reasons)
        super().__init__(", ".join(reasons))


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class RequiredDataMissingError(DomainException):
    """Data the order workflow cannot proceed without is absent."""


class MissingCustomerError(RequiredDataMissingError):
    """The order carries no customer reference."""


class CustomerNotFoundError(RequiredDataMissingError):
    """The customer directory has no entry for the order's customer."""


class DefaultTaxRateMissingError(RequiredDataMissingError):
    """The tax schedule has no entry named "Default"."""


class FulfillmentError(DomainException):
    """The fulfillment system did not accept the order."""
