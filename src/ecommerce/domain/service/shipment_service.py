"""Abstract shipment dispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ecommerce.domain.model.address import AddressInfo
from ecommerce.domain.model.cart import CartItem


class ShipmentService(ABC):

    @abstractmethod
    def ship(self, address: AddressInfo, items: list[CartItem]) -> None:
        """Arrange delivery of *items* to *address*."""
