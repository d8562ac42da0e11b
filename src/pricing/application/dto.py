"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry configuration in and quotes out without exposing domain
internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ProductSpec:
    """Input: one catalogue entry."""

    code: str
    name: str
    price: str | int | float | Decimal


@dataclass(frozen=True)
class DeliveryRuleSpec:
    """Input: one delivery bracket. An infinite threshold is the catch-all."""

    threshold: str | int | float | Decimal
    charge: str | int | float | Decimal


@dataclass(frozen=True)
class OfferSpec:
    """Input: an offer descriptor, e.g. ``OfferSpec("buy-one-get-one-half-price", "R01")``."""

    type: str
    target_code: str


@dataclass(frozen=True)
class RejectedCodeDTO:
    """Output: a product code that could not be added, and why."""

    code: str
    reason: str


@dataclass(frozen=True)
class BasketQuoteDTO:
    """Output: a priced basket as displayed to the user."""

    accepted: list[str]
    rejected: list[RejectedCodeDTO]
    subtotal: str  # formatted, e.g. "98.28"
    discount: str
    delivery: str
    total: str
