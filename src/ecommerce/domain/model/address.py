"""Shipment destination.

Opaque to the checkout; only the shipment adapter reads the fields.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecommerce.domain.exceptions import ValidationError


@dataclass(frozen=True)
class AddressInfo:
    recipient: str
    street: str
    city: str
    postal_code: str
    country: str

    def __post_init__(self) -> None:
        for name in ("recipient", "street", "city", "postal_code", "country"):
            value = getattr(self, name)
            if not value or not value.strip():
                raise ValidationError(f"Address {name.replace('_', ' ')} is required")

    def one_line(self) -> str:
        return (
            f"{self.recipient}, {self.street}, {self.postal_code} "
            f"{self.city}, {self.country}"
        )
