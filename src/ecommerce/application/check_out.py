"""Application service: Check Out use case.

Orchestrates the four collaborators of a checkout:

1. Read the cart total.
2. Ask the discount service for a discount on that total.
3. Charge ``total - discount`` to the card.
4. Only if the charge went through, ship the cart items to the address.

A declined card is a normal outcome ("not charged"), not an error.
Anything a collaborator raises propagates to the caller untouched.
"""

from __future__ import annotations

import logging

from ecommerce.domain.model.address import AddressInfo
from ecommerce.domain.model.card import Card
from ecommerce.domain.model.checkout import CheckoutResult
from ecommerce.domain.service.cart_service import CartService
from ecommerce.domain.service.discount_service import DiscountService
from ecommerce.domain.service.payment_service import PaymentService
from ecommerce.domain.service.shipment_service import ShipmentService

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_service: CartService,
        payment_service: PaymentService,
        shipment_service: ShipmentService,
        discount_service: DiscountService,
    ) -> None:
        self._cart_service = cart_service
        self._payment_service = payment_service
        self._shipment_service = shipment_service
        self._discount_service = discount_service

    def handle(self, card: Card, address: AddressInfo) -> str:
        """Check out the current cart.

        Returns ``"charged"`` or ``"not charged"``.  The discount is not
        checked against the total, so a discount larger than the total
        yields a negative amount which is handed to the payment service
        as-is.
        """
        total = self._cart_service.total()
        discount = self._discount_service.calculate_discount(total)
        net = total - discount
        logger.debug("Checkout total=%s discount=%s net=%s", total, discount, net)

        if not self._payment_service.charge(net, card):
            logger.info("Checkout not charged: payment of %s declined", net)
            return CheckoutResult.NOT_CHARGED.value

        items = self._cart_service.items()
        self._shipment_service.ship(address, items)
        logger.info("Checkout charged %s, shipment dispatched", net)
        return CheckoutResult.CHARGED.value
