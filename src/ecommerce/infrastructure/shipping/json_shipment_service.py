"""JSON-file-backed shipment dispatcher.

Each call to ``ship`` appends one shipment to the log with a snapshot
of the address and the items, so later cart changes do not alter it.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from ecommerce.domain.model.address import AddressInfo
from ecommerce.domain.model.cart import CartItem
from ecommerce.domain.service.shipment_service import ShipmentService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShipmentRecord:
    id: int
    destination: str
    items: list[dict]
    created_at: datetime


class JsonShipmentService(ShipmentService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ShipmentService interface --------------------------------------------

    def ship(self, address: AddressInfo, items: list[CartItem]) -> None:
        records = self._load_raw()
        next_id = max((r["id"] for r in records), default=0) + 1
        records.append(
            {
                "id": next_id,
                "address": {
                    "recipient": address.recipient,
                    "street": address.street,
                    "city": address.city,
                    "postal_code": address.postal_code,
                    "country": address.country,
                },
                "items": [
                    {
                        "product_id": item.product_id,
                        "product_name": item.product_name,
                        "quantity": item.quantity.value,
                    }
                    for item in items
                ],
                "created_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        self._persist_raw(records)
        logger.info("Shipment #%d to %s created", next_id, address.city)

    # --- Queries --------------------------------------------------------------

    def shipments(self) -> list[ShipmentRecord]:
        return [
            ShipmentRecord(
                id=raw["id"],
                destination=AddressInfo(**raw["address"]).one_line(),
                items=raw["items"],
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
            for raw in self._load_raw()
        ]

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
