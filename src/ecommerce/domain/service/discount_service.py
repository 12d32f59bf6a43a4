"""Abstract discount calculator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountService(ABC):

    @abstractmethod
    def calculate_discount(self, total: Decimal) -> Decimal:
        """Return the amount to take off *total* (zero for no discount)."""
