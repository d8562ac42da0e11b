"""Basket aggregate: the pricing orchestrator.

The basket owns only its list of added products. The catalogue, the
delivery schedule and the offers are shared, read-only configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pricing.domain.exceptions import InvalidProductCode, UnknownProduct, ValidationError
from pricing.domain.model.product import Product
from pricing.domain.model.value_objects import Money, normalize_code
from pricing.domain.offers.offer import Offer
from pricing.domain.repository.product_lookup import ProductLookup
from pricing.domain.service.delivery_charger import DeliveryCharger

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceBreakdown:
    """How a basket total was arrived at.

    ``discount`` is the amount actually taken off, so it never exceeds
    ``subtotal``. Only ``total`` is rounded.
    """

    subtotal: Money
    discount: Money
    delivery: Money
    total: Money


class Basket:
    """A shopping basket priced against shared configuration.

    ``total()`` has no side effects and can be called any number of
    times. A failed ``add()`` leaves previously added items untouched.
    """

    def __init__(
        self,
        catalogue: ProductLookup,
        delivery_rules: DeliveryCharger,
        offers: Iterable[Offer] = (),
    ) -> None:
        if not isinstance(catalogue, ProductLookup):
            raise TypeError(
                f"Catalogue must be a ProductLookup, got {type(catalogue).__name__}"
            )
        if not isinstance(delivery_rules, DeliveryCharger):
            raise TypeError(
                f"Delivery rules must be a DeliveryCharger, got {type(delivery_rules).__name__}"
            )
        offers = tuple(offers)
        for index, offer in enumerate(offers):
            if not isinstance(offer, Offer):
                raise TypeError(
                    f"Offer at index {index} must be an Offer, got {type(offer).__name__}"
                )

        self._catalogue = catalogue
        self._delivery_rules = delivery_rules
        self._offers = offers
        self._items: list[Product] = []

    # --- Commands -------------------------------------------------------------

    def add(self, code: str) -> None:
        """Add one unit of the product with *code*."""
        if not normalize_code(code):
            raise InvalidProductCode(f"Product code must be a non-empty string, got {code!r}")

        product = self._catalogue.find(code)
        if product is None:
            raise UnknownProduct(code)

        self._items.append(product)
        logger.debug("Added %s to basket (%d item(s))", product.code, len(self._items))

    # --- Queries --------------------------------------------------------------

    def breakdown(self) -> PriceBreakdown:
        """Price the basket.

        Steps:
        1. Sum item prices at full precision.
        2. Sum every offer's discount, in configured order.
        3. Clamp the discounted subtotal at zero.
        4. Look up delivery for the discounted subtotal.
        5. Round the final total to cents, once.
        """
        items = tuple(self._items)

        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal + item.price

        discount = Money.zero()
        for offer in self._offers:
            discount = discount + self._apply_offer(offer, items)

        discounted = Money.max(subtotal - discount, Money.zero())
        delivery = self._delivery_rules.charge_for(discounted)

        breakdown = PriceBreakdown(
            subtotal=subtotal,
            discount=subtotal - discounted,
            delivery=delivery,
            total=(discounted + delivery).round_to_cents(),
        )
        logger.debug("Basket breakdown: %s", breakdown)
        return breakdown

    @staticmethod
    def _apply_offer(offer: Offer, items: tuple[Product, ...]) -> Money:
        result = offer.apply(items)
        if not isinstance(result, Money):
            raise TypeError(
                f"Offer {offer!r} must return Money, got {type(result).__name__}"
            )
        if result.is_negative:
            raise ValidationError(f"Offer {offer!r} returned a negative discount: {result.amount}")
        return result

    def total(self) -> Money:
        return self.breakdown().total

    @property
    def items(self) -> tuple[Product, ...]:
        return tuple(self._items)

    @property
    def offers(self) -> tuple[Offer, ...]:
        return self._offers

    @property
    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
