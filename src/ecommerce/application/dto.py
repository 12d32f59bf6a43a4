"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: a product the customer wants in the cart."""

    product_id: str
    product_name: str
    price: str
    quantity: int = 1


@dataclass(frozen=True)
class CartItemDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart."""

    items: list[CartItemDTO]
    total: str

    @property
    def is_empty(self) -> bool:
        return not self.items
