"""Abstract payment processor."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ecommerce.domain.model.card import Card


class PaymentService(ABC):

    @abstractmethod
    def charge(self, amount: Decimal, card: Card) -> bool:
        """Attempt to charge *amount* to *card*.

        Returns False when the charge is declined.  Exceptions are
        reserved for the processor itself being unusable.
        """
