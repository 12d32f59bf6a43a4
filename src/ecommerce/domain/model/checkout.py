"""Outcome of a checkout attempt."""

from enum import Enum


class CheckoutResult(Enum):
    CHARGED = "charged"
    NOT_CHARGED = "not charged"
