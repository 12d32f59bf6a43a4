"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from decimal import Decimal

from ecommerce.domain.service.discount_service import DiscountService
from ecommerce.infrastructure.payment.card_payment_service import CardPaymentService
from ecommerce.infrastructure.persistence.json_cart_service import JsonCartService
from ecommerce.infrastructure.pricing.discount_services import (
    NoDiscountService,
    PercentageDiscountService,
    ThresholdDiscountService,
)
from ecommerce.infrastructure.settings import Settings, load_settings
from ecommerce.infrastructure.shipping.json_shipment_service import (
    JsonShipmentService,
)


def cart_service(settings: Settings | None = None) -> JsonCartService:
    settings = settings or load_settings()
    return JsonCartService(settings.data_dir / "cart.json")


def payment_service(settings: Settings | None = None) -> CardPaymentService:
    settings = settings or load_settings()
    return CardPaymentService(settings.data_dir / "payments.json")


def shipment_service(settings: Settings | None = None) -> JsonShipmentService:
    settings = settings or load_settings()
    return JsonShipmentService(settings.data_dir / "shipments.json")


def discount_service(settings: Settings | None = None) -> DiscountService:
    settings = settings or load_settings()
    if settings.discount_threshold is not None and settings.discount_amount is not None:
        return ThresholdDiscountService(
            settings.discount_threshold, settings.discount_amount
        )
    if settings.discount_rate == Decimal("0"):
        return NoDiscountService()
    return PercentageDiscountService(settings.discount_rate)