"""Unit tests for the Catalogue."""

import pytest

from pricing.domain.exceptions import DuplicateProductCode, InvalidProduct
from pricing.domain.model.catalogue import Catalogue
from pricing.domain.model.product import Product
from pricing.domain.repository.product_lookup import ProductLookup

RED = Product(code="R01", name="Red Widget", price="32.95")
GREEN = Product(code="G01", name="Green Widget", price="24.95")
BLUE = Product(code="B01", name="Blue Widget", price="7.95")


@pytest.fixture
def catalogue() -> Catalogue:
    return Catalogue([RED, GREEN, BLUE])


class TestCatalogueLookup:

    def test_is_a_product_lookup(self, catalogue):
        assert isinstance(catalogue, ProductLookup)

    @pytest.mark.parametrize("code", ["R01", "r01", "  R01  ", "\tr01\n"])
    def test_find_normalizes_code(self, catalogue, code):
        assert catalogue.find(code) is RED

    def test_find_each_product(self, catalogue):
        assert catalogue.find("G01") is GREEN
        assert catalogue.find("B01") is BLUE

    @pytest.mark.parametrize("code", ["UNKNOWN", "", "   ", None, 42])
    def test_find_misses_return_none(self, catalogue, code):
        assert catalogue.find(code) is None

    def test_len_and_contains(self, catalogue):
        assert len(catalogue) == 3
        assert "g01" in catalogue
        assert "X99" not in catalogue

    def test_products_keep_construction_order(self, catalogue):
        assert catalogue.products == (RED, GREEN, BLUE)

    def test_empty_catalogue_is_allowed(self):
        assert Catalogue([]).find("R01") is None

    def test_accepts_any_iterable(self):
        catalogue = Catalogue(p for p in [RED, GREEN])
        assert len(catalogue) == 2


class TestCatalogueValidation:

    def test_duplicate_code_rejected(self):
        clash = Product(code=" r01", name="Other Red", price="1.00")
        with pytest.raises(DuplicateProductCode, match="R01") as exc_info:
            Catalogue([RED, clash])
        assert exc_info.value.codes == ["R01"]

    def test_all_duplicates_listed_in_first_seen_order(self):
        products = [
            GREEN,
            RED,
            Product(code="r01", name="Red Again", price="1"),
            Product(code="g01", name="Green Again", price="1"),
            Product(code="R01 ", name="Red Third", price="1"),
            BLUE,
        ]
        with pytest.raises(DuplicateProductCode, match="R01, G01") as exc_info:
            Catalogue(products)
        assert exc_info.value.codes == ["R01", "G01"]

    def test_non_product_rejected(self):
        with pytest.raises(InvalidProduct, match="index 1"):
            Catalogue([RED, ("G01", "Green Widget", "24.95")])  # type: ignore[list-item]
