"""Read-only directory of products keyed by normalized code."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from pricing.domain.exceptions import DuplicateProductCode, InvalidProduct
from pricing.domain.model.product import Product
from pricing.domain.model.value_objects import normalize_code
from pricing.domain.repository.product_lookup import ProductLookup


class Catalogue(ProductLookup):
    """Immutable code -> Product lookup table.

    Construction validates everything up front: every element must be a
    Product and no two products may share a normalized code. All
    duplicated codes are reported together, in first-seen order.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        products = tuple(products)
        by_code: dict[str, Product] = {}
        duplicates: list[str] = []

        for index, product in enumerate(products):
            if not isinstance(product, Product):
                raise InvalidProduct(
                    f"Catalogue entry at index {index} is not a Product "
                    f"(got {type(product).__name__})"
                )
            key = product.normalized_code
            if key in by_code:
                if key not in duplicates:
                    duplicates.append(key)
                continue
            by_code[key] = product

        if duplicates:
            raise DuplicateProductCode(duplicates)

        self._products = products
        self._by_code = MappingProxyType(by_code)

    def find(self, code: str | None) -> Product | None:
        key = normalize_code(code)
        if not key:
            return None
        return self._by_code.get(key)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def __contains__(self, code: object) -> bool:
        return self.find(code) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._by_code)
