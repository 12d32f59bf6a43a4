"""JSON-file-backed implementation of the cart provider."""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from ecommerce.domain.exceptions import EntityNotFoundError
from ecommerce.domain.model.cart import CartItem, cart_total
from ecommerce.domain.model.value_objects import Money, Quantity
from ecommerce.domain.service.cart_service import EditableCartService


class JsonCartService(EditableCartService):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartService interface ------------------------------------------------

    def items(self) -> list[CartItem]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def total(self) -> Decimal:
        return cart_total(self.items()).amount

    # --- EditableCartService interface ----------------------------------------

    def add(self, item: CartItem) -> None:
        records = self._load_raw()
        for i, raw in enumerate(records):
            if raw["product_id"] == item.product_id:
                merged = self._to_domain(raw).merged_with(item)
                records[i] = self._to_raw(merged)
                break
        else:
            records.append(self._to_raw(item))
        self._persist_raw(records)

    def remove(self, product_id: str) -> None:
        records = self._load_raw()
        kept = [raw for raw in records if raw["product_id"] != product_id]
        if len(kept) == len(records):
            raise EntityNotFoundError(f"Product '{product_id}' is not in the cart")
        self._persist_raw(kept)

    def clear(self) -> None:
        self._persist_raw([])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(item: CartItem) -> dict:
        return {
            "product_id": item.product_id,
            "product_name": item.product_name,
            "price": str(item.price.amount),
            "currency": item.price.currency,
            "quantity": item.quantity.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> CartItem:
        return CartItem(
            product_id=raw["product_id"],
            product_name=raw["product_name"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=Quantity(raw.get("quantity", 1)),
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
