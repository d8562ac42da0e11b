"""Delivery charge schedule.

A schedule is a step function of the discounted subtotal. Each rule
covers the right-open interval ``[previous threshold, threshold)``, and
exactly one catch-all rule with an ``UNBOUNDED`` threshold guarantees
that every subtotal resolves to a charge.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Final

from pricing.domain.exceptions import InvalidAmount, InvalidRule
from pricing.domain.model.value_objects import Money
from pricing.domain.service.delivery_charger import DeliveryCharger


class _Unbounded:
    """Threshold greater than every subtotal."""

    _instance: _Unbounded | None = None

    def __new__(cls) -> _Unbounded:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED: Final = _Unbounded()

Threshold = Money | _Unbounded


@dataclass(frozen=True)
class DeliveryRule:
    """Charge applied to subtotals strictly below ``threshold``."""

    threshold: Threshold
    charge: Money

    def __post_init__(self) -> None:
        if self.threshold is not UNBOUNDED:
            if not isinstance(self.threshold, Money):
                raise InvalidRule(
                    f"Threshold must be Money or UNBOUNDED, got {type(self.threshold).__name__}"
                )
            if not self.threshold.is_positive:
                raise InvalidRule(f"Threshold must be greater than zero, got {self.threshold}")
        if not isinstance(self.charge, Money):
            raise InvalidRule(f"Charge must be Money, got {type(self.charge).__name__}")
        if self.charge.is_negative:
            raise InvalidRule(f"Charge cannot be negative, got {self.charge}")
        try:
            Money.of(self.charge.amount)
        except InvalidAmount as exc:
            raise InvalidRule(f"Invalid delivery charge: {self.charge.amount}") from exc

    @property
    def is_catch_all(self) -> bool:
        return self.threshold is UNBOUNDED

    def covers(self, subtotal: Money) -> bool:
        return self.is_catch_all or subtotal < self.threshold

    @staticmethod
    def of(threshold: Any, charge: Any) -> DeliveryRule:
        """Build a rule from raw values.

        ``float("inf")``, ``Decimal("Infinity")`` and ``"inf"`` all mean
        UNBOUNDED.
        """
        return DeliveryRule(_to_threshold(threshold), _to_charge(charge))

    def _sort_key(self) -> tuple[bool, Decimal]:
        if self.is_catch_all:
            return (True, Decimal(0))
        return (False, self.threshold.amount)  # type: ignore[union-attr]


def _to_threshold(value: Any) -> Threshold:
    if value is UNBOUNDED or isinstance(value, Money):
        return value
    if isinstance(value, bool):
        raise InvalidRule(f"Invalid threshold: {value!r}")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidRule(f"Invalid threshold: {value!r}") from exc
    if amount.is_nan():
        raise InvalidRule(f"Threshold cannot be NaN: {value!r}")
    if amount.is_infinite():
        if amount < 0:
            raise InvalidRule(f"Threshold cannot be negative infinity: {value!r}")
        return UNBOUNDED
    return Money(amount)


def _to_charge(value: Any) -> Money:
    if isinstance(value, Money):
        return value
    try:
        return Money.of(value)
    except InvalidAmount as exc:
        raise InvalidRule(f"Invalid delivery charge: {value!r}") from exc


class DeliveryRules(DeliveryCharger):
    """Ordered, validated delivery charge schedule.

    Accepts ``DeliveryRule`` instances or raw ``(threshold, charge)``
    pairs in any order; rules are sorted ascending by threshold.
    """

    def __init__(self, rules: Iterable[DeliveryRule | tuple[Any, Any]]) -> None:
        parsed = [self._parse(index, rule) for index, rule in enumerate(rules)]
        if not parsed:
            raise InvalidRule("Delivery rules cannot be empty")

        catch_alls = sum(1 for rule in parsed if rule.is_catch_all)
        if catch_alls != 1:
            raise InvalidRule(
                f"Delivery rules need exactly one UNBOUNDED catch-all rule, found {catch_alls}"
            )

        # sorted() is stable, so equal thresholds keep source order
        self._rules = tuple(sorted(parsed, key=DeliveryRule._sort_key))

    @property
    def rules(self) -> tuple[DeliveryRule, ...]:
        return self._rules

    def charge_for(self, subtotal: Money) -> Money:
        if not isinstance(subtotal, Money):
            raise InvalidAmount(f"Subtotal must be Money, got {type(subtotal).__name__}")
        if subtotal.is_negative:
            raise InvalidAmount(f"Subtotal cannot be negative, got {subtotal}")

        for rule in self._rules:
            if rule.covers(subtotal):
                return rule.charge
        raise AssertionError("catch-all delivery rule did not match")  # pragma: no cover

    @staticmethod
    def _parse(index: int, rule: DeliveryRule | tuple[Any, Any]) -> DeliveryRule:
        if isinstance(rule, DeliveryRule):
            return rule
        try:
            threshold, charge = rule
        except (TypeError, ValueError) as exc:
            raise InvalidRule(
                f"Delivery rule at index {index} must be a (threshold, charge) pair"
            ) from exc
        return DeliveryRule.of(threshold, charge)

    def __len__(self) -> int:
        return len(self._rules)
