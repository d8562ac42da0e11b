"""Composition root — wires the default shop configuration.

This is the only place in the codebase that knows the concrete
catalogue, delivery brackets and offers. Every other module receives
them as arguments.
"""

from __future__ import annotations

from pricing.application.dto import DeliveryRuleSpec, OfferSpec, ProductSpec
from pricing.application.offer_registry import BUY_ONE_GET_ONE_HALF_PRICE
from pricing.application.price_basket import PriceBasketHandler
from pricing.application.pricing_setup import PricingConfiguration, build_configuration

DEFAULT_PRODUCTS: tuple[ProductSpec, ...] = (
    ProductSpec("R01", "Red Widget", "32.95"),
    ProductSpec("G01", "Green Widget", "24.95"),
    ProductSpec("B01", "Blue Widget", "7.95"),
)

# Orders under 50 pay 4.95, under 90 pay 2.95, anything else ships free.
DEFAULT_DELIVERY_RULES: tuple[DeliveryRuleSpec, ...] = (
    DeliveryRuleSpec("50", "4.95"),
    DeliveryRuleSpec("90", "2.95"),
    DeliveryRuleSpec("Infinity", "0"),
)

DEFAULT_OFFERS: tuple[OfferSpec, ...] = (
    OfferSpec(BUY_ONE_GET_ONE_HALF_PRICE, "R01"),
)


def default_configuration() -> PricingConfiguration:
    return build_configuration(DEFAULT_PRODUCTS, DEFAULT_DELIVERY_RULES, DEFAULT_OFFERS)


def price_basket_handler() -> PriceBasketHandler:
    return PriceBasketHandler(default_configuration())
