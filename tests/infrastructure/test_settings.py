"""Tests for environment-driven settings and the composition root."""

from decimal import Decimal
from pathlib import Path

import pytest

from ecommerce.domain.exceptions import ConfigurationError
from ecommerce.infrastructure import bootstrap
from ecommerce.infrastructure.pricing.discount_services import (
    NoDiscountService,
    PercentageDiscountService,
    ThresholdDiscountService,
)
from ecommerce.infrastructure.settings import (
    DEFAULT_DATA_DIR,
    Settings,
    load_settings,
)


def test_defaults():
    settings = load_settings({})
    assert settings.data_dir == DEFAULT_DATA_DIR
    assert settings.discount_rate == Decimal("0.10")
    assert settings.log_level == "WARNING"


def test_overrides(tmp_path):
    settings = load_settings({
        "ECOMMERCE_DATA_DIR": str(tmp_path),
        "ECOMMERCE_DISCOUNT_RATE": "0.25",
        "ECOMMERCE_LOG_LEVEL": "debug",
    })
    assert settings.data_dir == Path(tmp_path)
    assert settings.discount_rate == Decimal("0.25")
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("rate", ["abc", "-0.1", "2", "NaN", "Infinity", "-Infinity"])
def test_bad_discount_rate_rejected(rate):
    with pytest.raises(ConfigurationError, match="ECOMMERCE_DISCOUNT_RATE"):
        load_settings({"ECOMMERCE_DISCOUNT_RATE": rate})


def test_bad_log_level_rejected():
    with pytest.raises(ConfigurationError, match="ECOMMERCE_LOG_LEVEL"):
        load_settings({"ECOMMERCE_LOG_LEVEL": "LOUD"})


def test_zero_rate_selects_no_discount(tmp_path):
    settings = Settings(data_dir=tmp_path, discount_rate=Decimal("0"))
    assert isinstance(bootstrap.discount_service(settings), NoDiscountService)


def test_rate_selects_percentage_discount(tmp_path):
    svc = bootstrap.discount_service(Settings(data_dir=tmp_path, discount_rate=Decimal("0.2")))
    assert isinstance(svc, PercentageDiscountService)
    assert svc.rate == Decimal("0.2")


def test_file_adapters_use_data_dir(tmp_path):
    settings = Settings(data_dir=tmp_path)
    bootstrap.cart_service(settings)
    bootstrap.payment_service(settings)
    bootstrap.shipment_service(settings)
    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "cart.json",
        "payments.json",
        "shipments.json",
    ]


def test_threshold_discount_settings():
    settings = load_settings({
        "ECOMMERCE_DISCOUNT_THRESHOLD": "100",
        "ECOMMERCE_DISCOUNT_AMOUNT": "15",
    })
    assert settings.discount_threshold == Decimal("100")
    assert settings.discount_amount == Decimal("15")


@pytest.mark.parametrize(
    "env",
    [
        {"ECOMMERCE_DISCOUNT_THRESHOLD": "100"},
        {"ECOMMERCE_DISCOUNT_AMOUNT": "15"},
    ],
)
def test_threshold_without_amount_rejected(env):
    with pytest.raises(ConfigurationError, match="must be set together"):
        load_settings(env)


@pytest.mark.parametrize(
    "env, match",
    [
        ({"ECOMMERCE_DISCOUNT_THRESHOLD": "-1", "ECOMMERCE_DISCOUNT_AMOUNT": "5"}, "cannot be negative"),
        ({"ECOMMERCE_DISCOUNT_THRESHOLD": "100", "ECOMMERCE_DISCOUNT_AMOUNT": "NaN"}, "finite"),
    ],
)
def test_bad_threshold_values_rejected(env, match):
    with pytest.raises(ConfigurationError, match=match):
        load_settings(env)


def test_threshold_selects_threshold_discount(tmp_path):
    settings = Settings(
        data_dir=tmp_path,
        discount_threshold=Decimal("100"),
        discount_amount=Decimal("15"),
    )
    svc = bootstrap.discount_service(settings)
    assert isinstance(svc, ThresholdDiscountService)
    assert svc.calculate_discount(Decimal("120")) == Decimal("15")
    assert svc.calculate_discount(Decimal("99")) == Decimal("0.00")
