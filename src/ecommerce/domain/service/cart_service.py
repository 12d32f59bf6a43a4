"""Abstract cart provider.

Defined in the domain layer so the checkout never depends on how the
cart is stored.  The JSON-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ecommerce.domain.model.cart import CartItem


class CartService(ABC):

    @abstractmethod
    def items(self) -> list[CartItem]:
        """Return the line items currently in the cart, in insertion order."""

    @abstractmethod
    def total(self) -> Decimal:
        """Return the cart total before any discount."""


class EditableCartService(CartService):
    """A cart the customer can change before checking out."""

    @abstractmethod
    def add(self, item: CartItem) -> None:
        """Add *item*, merging quantities with an existing line of the same product."""

    @abstractmethod
    def remove(self, product_id: str) -> None:
        """Remove the line for *product_id*; raise EntityNotFoundError if absent."""

    @abstractmethod
    def clear(self) -> None:
        """Empty the cart."""
