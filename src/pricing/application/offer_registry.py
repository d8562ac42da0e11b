"""Offer registry - maps descriptor type names to Offer factories.

This is the glue between plain offer descriptors supplied by whoever
configures the shop and the concrete Offer implementations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pricing.application.dto import OfferSpec
from pricing.domain.exceptions import UnknownOfferType, ValidationError
from pricing.domain.offers.buy_one_get_one_half_price import BuyOneGetOneHalfPrice
from pricing.domain.offers.offer import Offer

BUY_ONE_GET_ONE_HALF_PRICE = "buy-one-get-one-half-price"

OFFER_REGISTRY: dict[str, Callable[[OfferSpec], Offer]] = {
    BUY_ONE_GET_ONE_HALF_PRICE: lambda spec: BuyOneGetOneHalfPrice(spec.target_code),
}


def to_offer_spec(descriptor: OfferSpec | Mapping[str, Any]) -> OfferSpec:
    """Accept an OfferSpec or a ``{"type": ..., "target_code": ...}`` mapping.

    ``targetCode`` is accepted as an alias for ``target_code``.
    """
    if isinstance(descriptor, OfferSpec):
        return descriptor
    if not isinstance(descriptor, Mapping):
        raise ValidationError(
            f"Offer descriptor must be a mapping, got {type(descriptor).__name__}"
        )

    offer_type = descriptor.get("type")
    target_code = descriptor.get("target_code", descriptor.get("targetCode"))
    if not isinstance(offer_type, str) or not offer_type.strip():
        raise ValidationError(f"Offer descriptor is missing a type: {dict(descriptor)!r}")
    if not isinstance(target_code, str):
        raise ValidationError(
            f"Offer descriptor is missing a target code: {dict(descriptor)!r}"
        )
    return OfferSpec(type=offer_type.strip(), target_code=target_code)


def build_offer(descriptor: OfferSpec | Mapping[str, Any]) -> Offer:
    """Resolve a descriptor to an Offer instance.

    Raises:
        UnknownOfferType: if no factory is registered for the type.
        ValidationError: if the descriptor is malformed.
    """
    spec = to_offer_spec(descriptor)
    factory = OFFER_REGISTRY.get(spec.type.lower())
    if factory is None:
        known = ", ".join(sorted(OFFER_REGISTRY))
        raise UnknownOfferType(f"Unknown offer type {spec.type!r} (known: {known})")
    return factory(spec)
