"""Buy one, get the second half price."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pricing.domain.exceptions import InvalidProductCode
from pricing.domain.model.value_objects import Money, normalize_code
from pricing.domain.offers.offer import Offer, PricedItem

logger = logging.getLogger(__name__)


class BuyOneGetOneHalfPrice(Offer):
    """Every second matching item is half price.

    Matching prices are sorted highest first and paired up; the cheaper
    item of each pair gets 50% off. An odd item out pays full price.
    """

    def __init__(self, product_code: str) -> None:
        code = normalize_code(product_code)
        if not code:
            raise InvalidProductCode("Offer product code cannot be empty")
        self._product_code = code

    @property
    def product_code(self) -> str:
        return self._product_code

    def apply(self, items: Sequence[PricedItem]) -> Money:
        self._validate_items(items)

        prices = sorted(
            (item.price for item in items if normalize_code(item.code) == self._product_code),
            reverse=True,
        )

        discount = Money.zero()
        # prices[1::2] is the cheaper half of each (full, discounted) pair
        for discounted_price in prices[1::2]:
            discount = discount + discounted_price.half()

        if discount.is_positive:
            logger.debug(
                "%s: %d matching item(s), discount %s",
                self, len(prices), discount,
            )
        return discount

    @staticmethod
    def _validate_items(items: Sequence[PricedItem]) -> None:
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise TypeError(f"Items must be a sequence, got {type(items).__name__}")
        for index, item in enumerate(items):
            if not hasattr(item, "code") or not hasattr(item, "price"):
                raise TypeError(f"Item at index {index} must expose code and price")
            if not isinstance(item.price, Money):
                raise TypeError(
                    f"Item at index {index} price must be Money, "
                    f"got {type(item.price).__name__}"
                )

    def __repr__(self) -> str:
        return f"BuyOneGetOneHalfPrice({self._product_code!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BuyOneGetOneHalfPrice):
            return NotImplemented
        return self._product_code == other._product_code

    def __hash__(self) -> int:
        return hash((type(self), self._product_code))
