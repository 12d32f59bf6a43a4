"""Payment instrument.

The checkout passes a Card straight through to the payment service and
never reads it.  Only the concrete payment adapter inspects the number
and the expiry date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ecommerce.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Card:
    holder: str
    number: str
    expiry_month: int
    expiry_year: int

    def __post_init__(self) -> None:
        if not self.holder or not self.holder.strip():
            raise ValidationError("Card holder is required")
        if not self.number.isdigit() or not 12 <= len(self.number) <= 19:
            raise ValidationError("Card number must be 12 to 19 digits")
        if not 1 <= self.expiry_month <= 12:
            raise ValidationError(
                f"Expiry month must be between 1 and 12, got {self.expiry_month}"
            )

    @property
    def last_four(self) -> str:
        return self.number[-4:]

    @property
    def masked_number(self) -> str:
        return "*" * (len(self.number) - 4) + self.last_four

    def is_expired(self, today: date) -> bool:
        """A card is valid through the last day of its expiry month."""
        return (today.year, today.month) > (self.expiry_year, self.expiry_month)

    def passes_luhn(self) -> bool:
        """Luhn mod-10 check over the card number."""
        checksum = 0
        for position, char in enumerate(reversed(self.number)):
            digit = int(char)
            if position % 2 == 1:
                digit *= 2
                if digit > 9:
                    digit -= 9
            checksum += digit
        return checksum % 10 == 0
