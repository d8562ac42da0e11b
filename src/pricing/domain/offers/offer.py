"""Offer capability.

An offer looks at every item in a basket and returns how much to take
off. Offers are stateless and independent: the basket simply sums
what each one returns.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from pricing.domain.model.value_objects import Money


class PricedItem(Protocol):
    """Anything with a product code and a unit price."""

    @property
    def code(self) -> str: ...

    @property
    def price(self) -> Money: ...


class Offer(ABC):

    @abstractmethod
    def apply(self, items: Sequence[PricedItem]) -> Money:
        """Return the discount for *items*.

        Must never be negative, never exceed the total price of the
        items it matches, and must not depend on item order.
        """
