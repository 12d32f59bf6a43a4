"""Application service: Add Cart Item use case."""

from __future__ import annotations

from ecommerce.application.dto import CartItemSpec
from ecommerce.domain.model.cart import CartItem
from ecommerce.domain.model.value_objects import Money, Quantity
from ecommerce.domain.service.cart_service import EditableCartService


class AddCartItemHandler:

    def __init__(self, cart_service: EditableCartService) -> None:
        self._cart_service = cart_service

    def handle(self, spec: CartItemSpec) -> CartItem:
        """Put a product in the cart at the given unit price."""
        item = CartItem(
            product_id=spec.product_id.strip(),
            product_name=spec.product_name.strip(),
            price=Money.of(spec.price),
            quantity=Quantity(spec.quantity),
        )
        self._cart_service.add(item)
        return item
