"""Product value.

Products are created once by whoever owns the catalogue and never
change afterwards. Baskets hold references to them, so a product's
price is effectively locked in at the moment it is added.
"""

from __future__ import annotations

from dataclasses import dataclass

from pricing.domain.exceptions import InvalidAmount, InvalidProduct
from pricing.domain.model.value_objects import Money, normalize_code


@dataclass(frozen=True)
class Product:
    """A product in the catalogue.

    ``code`` and ``name`` are stored stripped. ``price`` may be given as
    Money or as anything ``Money.of()`` accepts.
    """

    code: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code.strip():
            raise InvalidProduct("Product code cannot be empty")
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidProduct(f"Product name cannot be empty (code {self.code.strip()})")

        raw = self.price.amount if isinstance(self.price, Money) else self.price
        try:
            price = Money.of(raw)
        except InvalidAmount as exc:
            raise InvalidProduct(
                f"Product {self.code.strip()} has an invalid price: {self.price!r}"
            ) from exc
        if not price.is_positive:
            raise InvalidProduct(
                f"Product {self.code.strip()} price must be greater than zero, got {price}"
            )

        object.__setattr__(self, "code", self.code.strip())
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "price", price)

    @property
    def normalized_code(self) -> str:
        return normalize_code(self.code)
