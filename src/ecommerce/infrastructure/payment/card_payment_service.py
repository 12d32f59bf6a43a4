"""Card payment processor backed by a JSON charge ledger.

There is no real gateway behind this adapter.  It declines what a
gateway would obviously refuse (non-positive amounts, expired cards,
numbers failing the Luhn check) and records every accepted charge.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Callable

from ecommerce.domain.model.card import Card
from ecommerce.domain.model.value_objects import CENT
from ecommerce.domain.service.payment_service import PaymentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChargeRecord:
    id: int
    amount: Decimal
    holder: str
    card_number: str  # masked, last four digits only
    charged_at: datetime


class CardPaymentService(PaymentService):

    def __init__(
        self,
        file_path: Path,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._file_path = file_path
        self._today = today
        self._ensure_file()

    # --- PaymentService interface ---------------------------------------------

    def charge(self, amount: Decimal, card: Card) -> bool:
        amount = Decimal(str(amount)).quantize(CENT, rounding=ROUND_HALF_UP)
        reason = self._decline_reason(amount, card)
        if reason is not None:
            logger.info("Declined charge of %s to card %s: %s", amount, card.masked_number, reason)
            return False

        records = self._load_raw()
        next_id = max((r["id"] for r in records), default=0) + 1
        record = ChargeRecord(
            id=next_id,
            amount=amount,
            holder=card.holder,
            card_number=card.masked_number,
            charged_at=datetime.now(timezone.utc),
        )
        records.append(self._to_raw(record))
        self._persist_raw(records)
        logger.info("Charged %s to card %s (charge #%d)", amount, card.masked_number, next_id)
        return True

    # --- Queries --------------------------------------------------------------

    def charges(self) -> list[ChargeRecord]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Rules ----------------------------------------------------------------

    def _decline_reason(self, amount: Decimal, card: Card) -> str | None:
        if amount <= 0:
            return "amount must be positive"
        if card.is_expired(self._today()):
            return "card expired"
        if not card.passes_luhn():
            return "invalid card number"
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(record: ChargeRecord) -> dict:
        return {
            "id": record.id,
            "amount": str(record.amount),
            "holder": record.holder,
            "card_number": record.card_number,
            "charged_at": record.charged_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> ChargeRecord:
        return ChargeRecord(
            id=raw["id"],
            amount=Decimal(raw["amount"]),
            holder=raw["holder"],
            card_number=raw["card_number"],
            charged_at=datetime.fromisoformat(raw["charged_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
