"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from ecommerce.application.dto import CartDTO, CartItemDTO
from ecommerce.domain.model.cart import cart_total
from ecommerce.domain.service.cart_service import CartService


class ShowCartHandler:

    def __init__(self, cart_service: CartService) -> None:
        self._cart_service = cart_service

    def handle(self) -> CartDTO:
        items = self._cart_service.items()
        return CartDTO(
            items=[
                CartItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in items
            ],
            total=str(cart_total(items)),
        )
