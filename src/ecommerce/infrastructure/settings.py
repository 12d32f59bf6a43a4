"""Runtime settings read from environment variables.

ECOMMERCE_DATA_DIR            directory holding cart.json, payments.json, shipments.json
ECOMMERCE_DISCOUNT_RATE       fraction taken off every checkout total (0 disables it)
ECOMMERCE_DISCOUNT_THRESHOLD  with ECOMMERCE_DISCOUNT_AMOUNT, a flat amount off totals
ECOMMERCE_DISCOUNT_AMOUNT     at or above the threshold; replaces the rate when set
ECOMMERCE_LOG_LEVEL           standard logging level name
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Mapping

from ecommerce.domain.exceptions import ConfigurationError

# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
DEFAULT_DISCOUNT_RATE = Decimal("0.10")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    discount_rate: Decimal = DEFAULT_DISCOUNT_RATE
    discount_threshold: Decimal | None = None
    discount_amount: Decimal | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def _decimal_setting(env: Mapping[str, str], name: str) -> Decimal | None:
    """Read *name* as a finite Decimal, or None when unset."""
    raw = env.get(name)
    if not raw:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} is not a number: {raw!r}") from exc
    if not value.is_finite():
        raise ConfigurationError(f"{name} must be a finite number, got {raw!r}")
    return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ

    if env.get("ECOMMERCE_DATA_DIR"):
        data_dir = Path(env["ECOMMERCE_DATA_DIR"])
    else:
        data_dir = DEFAULT_DATA_DIR

    rate = _decimal_setting(env, "ECOMMERCE_DISCOUNT_RATE")
    if rate is None:
        rate = DEFAULT_DISCOUNT_RATE
    elif not Decimal("0") <= rate <= Decimal("1"):
        raise ConfigurationError(
            f"ECOMMERCE_DISCOUNT_RATE must be between 0 and 1, got {rate}"
        )

    threshold = _decimal_setting(env, "ECOMMERCE_DISCOUNT_THRESHOLD")
    amount = _decimal_setting(env, "ECOMMERCE_DISCOUNT_AMOUNT")
    if (threshold is None) != (amount is None):
        raise ConfigurationError(
            "ECOMMERCE_DISCOUNT_THRESHOLD and ECOMMERCE_DISCOUNT_AMOUNT must be set together"
        )
    for name, value in (
        ("ECOMMERCE_DISCOUNT_THRESHOLD", threshold),
        ("ECOMMERCE_DISCOUNT_AMOUNT", amount),
    ):
        if value is not None and value < 0:
            raise ConfigurationError(f"{name} cannot be negative, got {value}")

    level = env.get("ECOMMERCE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown ECOMMERCE_LOG_LEVEL: {level!r}")

    return Settings(
        data_dir=data_dir,
        discount_rate=rate,
        discount_threshold=threshold,
        discount_amount=amount,
        log_level=level,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("ecommerce").setLevel(level)
