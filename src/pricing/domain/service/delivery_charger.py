"""Abstract delivery charge policy."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pricing.domain.model.value_objects import Money


class DeliveryCharger(ABC):

    @abstractmethod
    def charge_for(self, subtotal: Money) -> Money:
        """Return the delivery charge for a (discounted) subtotal."""
