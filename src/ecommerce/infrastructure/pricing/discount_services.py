"""Concrete discount calculators."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import CENT
from ecommerce.domain.service.discount_service import DiscountService


class NoDiscountService(DiscountService):

    def calculate_discount(self, total: Decimal) -> Decimal:
        return Decimal("0.00")


class PercentageDiscountService(DiscountService):
    """Takes a fixed fraction off every total, rounded half-up to cents."""

    def __init__(self, rate: Decimal) -> None:
        if not rate.is_finite() or not Decimal("0") <= rate <= Decimal("1"):
            raise ValidationError(f"Discount rate must be between 0 and 1, got {rate}")
        self._rate = rate

    @property
    def rate(self) -> Decimal:
        return self._rate

    def calculate_discount(self, total: Decimal) -> Decimal:
        discount = Decimal(str(total)) * self._rate
        return discount.quantize(CENT, rounding=ROUND_HALF_UP)


class ThresholdDiscountService(DiscountService):
    """Flat amount off once the total reaches a threshold.

    The discount is capped at the total so it never exceeds what is owed.
    """

    def __init__(self, threshold: Decimal, amount: Decimal) -> None:
        if not threshold.is_finite() or not amount.is_finite():
            raise ValidationError("Threshold and discount amount must be finite")
        if threshold < 0 or amount < 0:
            raise ValidationError("Threshold and discount amount cannot be negative")
        self._threshold = threshold
        self._amount = amount

    def calculate_discount(self, total: Decimal) -> Decimal:
        total = Decimal(str(total))
        if total < self._threshold:
            return Decimal("0.00")
        return min(self._amount, total)
