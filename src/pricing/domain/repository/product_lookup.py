"""Abstract product lookup.

Defined in the domain layer so the basket never depends on how the
catalogue is built. ``Catalogue`` is the in-memory implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing.domain.model.product import Product


class ProductLookup(ABC):

    @abstractmethod
    def find(self, code: str | None) -> Product | None:
        """Return the product for *code*, or None if there is none."""
