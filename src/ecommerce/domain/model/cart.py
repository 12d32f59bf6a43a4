"""Cart line items.

A CartItem is what the cart provider hands to the checkout: the
orchestrator never looks inside it, it only passes the list on to the
shipment service.  The concrete adapters use ``price`` and ``quantity``
to compute totals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecommerce.domain.exceptions import ValidationError
from ecommerce.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    """A single priced entry in a cart."""

    product_id: str
    product_name: str
    price: Money  # unit price
    quantity: Quantity = Quantity(1)

    def __post_init__(self) -> None:
        if not self.product_id or not self.product_id.strip():
            raise ValidationError("Product ID is required")
        if not self.product_name or not self.product_name.strip():
            raise ValidationError("Product name is required")

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value

    def merged_with(self, other: CartItem) -> CartItem:
        """Return a copy holding the units of both lines.

        Both lines must be the same product at the same unit price; a
        price change has to go through removing the line first.
        """
        if other.product_id != self.product_id:
            raise ValidationError(
                f"Cannot merge product '{other.product_id}' into '{self.product_id}'"
            )
        if other.price != self.price:
            raise ValidationError(
                f"'{self.product_name}' is already in the cart at {self.price}, "
                f"not {other.price}"
            )
        return CartItem(
            product_id=self.product_id,
            product_name=self.product_name,
            price=self.price,
            quantity=self.quantity + other.quantity,
        )


def cart_total(items: list[CartItem]) -> Money:
    """Sum of line totals; an empty cart totals zero."""
    result = Money.zero()
    for item in items:
        result = result + item.line_total
    return result
