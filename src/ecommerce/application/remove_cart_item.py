"""Application service: Remove Cart Item use case."""

from __future__ import annotations

from ecommerce.domain.service.cart_service import EditableCartService


class RemoveCartItemHandler:

    def __init__(self, cart_service: EditableCartService) -> None:
        self._cart_service = cart_service

    def handle(self, product_id: str) -> None:
        self._cart_service.remove(product_id.strip())
