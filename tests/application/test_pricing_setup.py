"""Tests for building shared pricing configuration."""

import pytest

from pricing.application.dto import DeliveryRuleSpec, OfferSpec, ProductSpec
from pricing.application.pricing_setup import PricingConfiguration, build_configuration
from pricing.domain.exceptions import (
    DuplicateProductCode,
    InvalidProduct,
    InvalidRule,
    UnknownOfferType,
)
from pricing.domain.model.product import Product
from pricing.domain.model.value_objects import Money
from pricing.domain.offers.buy_one_get_one_half_price import BuyOneGetOneHalfPrice

PRODUCTS = [
    ("R01", "Red Widget", 32.95),
    ("G01", "Green Widget", 24.95),
    ("B01", "Blue Widget", 7.95),
]
RULES = [(50, 4.95), (90, 2.95), (float("inf"), 0.0)]
OFFERS = [{"type": "buy-one-get-one-half-price", "targetCode": "R01"}]


class TestBuildConfiguration:

    def test_from_plain_tuples(self):
        config = build_configuration(PRODUCTS, RULES, OFFERS)
        assert len(config.catalogue) == 3
        assert len(config.delivery_rules) == 3
        assert config.offers == (BuyOneGetOneHalfPrice("R01"),)

    def test_float_prices_become_exact_decimals(self):
        config = build_configuration(PRODUCTS, RULES)
        assert config.catalogue.find("R01").price == Money.of("32.95")

    def test_from_specs(self):
        config = build_configuration(
            [ProductSpec("R01", "Red Widget", "32.95")],
            [DeliveryRuleSpec("Infinity", "0")],
            [OfferSpec("buy-one-get-one-half-price", "R01")],
        )
        basket = config.new_basket()
        basket.add("R01")
        basket.add("R01")
        assert basket.total() == Money.of("49.43")

    def test_products_and_offers_passed_through(self):
        red = Product("R01", "Red Widget", "32.95")
        offer = BuyOneGetOneHalfPrice("R01")
        config = build_configuration([red], RULES, [offer])
        assert config.catalogue.find("r01") is red
        assert config.offers[0] is offer

    def test_offers_default_to_none(self):
        assert build_configuration(PRODUCTS, RULES).offers == ()

    def test_new_basket_is_fresh_each_time(self):
        config = build_configuration(PRODUCTS, RULES, OFFERS)
        first = config.new_basket()
        first.add("R01")
        second = config.new_basket()
        assert second.is_empty
        assert second.offers == config.offers

    def test_configuration_is_frozen(self):
        config = build_configuration(PRODUCTS, RULES)
        assert isinstance(config, PricingConfiguration)
        with pytest.raises(AttributeError):
            config.offers = ()  # type: ignore[misc]


class TestBuildConfigurationValidation:

    def test_bad_product_tuple_rejected(self):
        with pytest.raises(InvalidProduct, match="index 1"):
            build_configuration([PRODUCTS[0], ("G01", "Green Widget")], RULES)

    def test_bad_product_rejected(self):
        with pytest.raises(InvalidProduct, match="greater than zero"):
            build_configuration([("R01", "Red Widget", 0)], RULES)

    def test_duplicate_products_rejected(self):
        with pytest.raises(DuplicateProductCode, match="R01"):
            build_configuration(PRODUCTS + [("r01", "Red Again", 1)], RULES)

    def test_missing_catch_all_rejected(self):
        with pytest.raises(InvalidRule):
            build_configuration(PRODUCTS, RULES[:2])

    def test_unknown_offer_rejected(self):
        with pytest.raises(UnknownOfferType):
            build_configuration(PRODUCTS, RULES, [{"type": "free-stuff", "target_code": "R01"}])
