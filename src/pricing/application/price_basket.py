"""Application service: Price Basket use case.

Prices a batch of product codes against shared configuration. A bad
code is reported back instead of aborting the rest of the batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pricing.application.dto import BasketQuoteDTO, RejectedCodeDTO
from pricing.application.pricing_setup import PricingConfiguration
from pricing.domain.exceptions import InvalidProductCode, UnknownProduct
from pricing.domain.model.basket import Basket

logger = logging.getLogger(__name__)


class PriceBasketHandler:

    def __init__(self, configuration: PricingConfiguration) -> None:
        self._configuration = configuration

    def handle(self, codes: Iterable[str]) -> BasketQuoteDTO:
        """Add every code to a fresh basket and quote it.

        Steps:
        1. Add each code; collect the ones the basket refuses.
        2. Price whatever was accepted.
        3. Return a DTO.
        """
        basket = self._configuration.new_basket()
        accepted: list[str] = []
        rejected: list[RejectedCodeDTO] = []

        for code in codes:
            try:
                basket.add(code)
            except (InvalidProductCode, UnknownProduct) as exc:
                logger.warning("Rejected product code %r: %s", code, exc)
                rejected.append(RejectedCodeDTO(code=str(code), reason=str(exc)))
                continue
            accepted.append(code)

        return self._to_dto(basket, accepted, rejected)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_dto(
        basket: Basket,
        accepted: list[str],
        rejected: list[RejectedCodeDTO],
    ) -> BasketQuoteDTO:
        breakdown = basket.breakdown()
        return BasketQuoteDTO(
            accepted=accepted,
            rejected=rejected,
            subtotal=str(breakdown.subtotal),
            discount=str(breakdown.discount),
            delivery=str(breakdown.delivery),
            total=str(breakdown.total),
        )
