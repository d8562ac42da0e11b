"""Application service: build shared pricing configuration.

Turns plain product tuples, delivery brackets and offer descriptors
into validated domain objects. Everything fails eagerly here so that
baskets never see a half-valid configuration.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pricing.application.dto import DeliveryRuleSpec, OfferSpec, ProductSpec
from pricing.application.offer_registry import build_offer
from pricing.domain.exceptions import InvalidProduct
from pricing.domain.model.basket import Basket
from pricing.domain.model.catalogue import Catalogue
from pricing.domain.model.delivery_rules import DeliveryRules
from pricing.domain.model.product import Product
from pricing.domain.offers.offer import Offer


@dataclass(frozen=True)
class PricingConfiguration:
    """Read-only configuration shared by every basket."""

    catalogue: Catalogue
    delivery_rules: DeliveryRules
    offers: tuple[Offer, ...] = ()

    def new_basket(self) -> Basket:
        return Basket(self.catalogue, self.delivery_rules, self.offers)


def build_configuration(
    products: Iterable[ProductSpec | Product | tuple[Any, Any, Any]],
    delivery_rules: Iterable[DeliveryRuleSpec | tuple[Any, Any]],
    offers: Iterable[OfferSpec | Offer | Mapping[str, Any]] = (),
) -> PricingConfiguration:
    catalogue = Catalogue(_to_product(index, p) for index, p in enumerate(products))
    rules = DeliveryRules(
        (r.threshold, r.charge) if isinstance(r, DeliveryRuleSpec) else r
        for r in delivery_rules
    )
    built_offers = tuple(o if isinstance(o, Offer) else build_offer(o) for o in offers)
    return PricingConfiguration(catalogue, rules, built_offers)


def _to_product(index: int, entry: ProductSpec | Product | tuple[Any, Any, Any]) -> Product:
    if isinstance(entry, Product):
        return entry
    if isinstance(entry, ProductSpec):
        return Product(code=entry.code, name=entry.name, price=entry.price)
    try:
        code, name, price = entry
    except (TypeError, ValueError) as exc:
        raise InvalidProduct(
            f"Product at index {index} must be a (code, name, price) tuple"
        ) from exc
    return Product(code=code, name=name, price=price)
