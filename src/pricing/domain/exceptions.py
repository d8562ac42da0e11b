"""Domain-level exceptions.

All pricing rule violations are expressed as subclasses of DomainException
so callers can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class InvalidAmount(ValidationError):
    """A monetary value is malformed, non-finite or negative."""


class InvalidProduct(ValidationError):
    """A product has a bad code, name or price."""


class DuplicateProductCode(ValidationError):
    """Two or more catalogue products share a normalized code."""

    def __init__(self, codes: list[str]) -> None:
        self.codes = list(codes)
        super().__init__(f"Duplicate product codes: {', '.join(self.codes)}")


class InvalidRule(ValidationError):
    """A delivery charge schedule is malformed."""


class InvalidProductCode(ValidationError):
    """A product code is missing or blank."""


class UnknownOfferType(ValidationError):
    """An offer descriptor names a type nobody registered."""


class UnknownProduct(EntityNotFoundError):
    """A product code is not in the catalogue."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Unknown product code: {code!r}")
