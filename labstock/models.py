# labstock/models.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from sqlalchemy import Column, DateTime, String, Text, func

from .core.config import settings
from .db import Base
from .errors import InventoryError
from .parsing import parse_price, parse_quantity

log = logging.getLogger(__name__)


class StorageSlot(Base):
    """One named key-value slot; the whole inventory lives in a single row."""

    __tablename__ = "storage_slots"
    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)  # JSON array of item records
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


_CENTS = Decimal("0.01")


def _group_en_in(digits: str) -> str:
    """Indian digit grouping: last three digits, then pairs (12,34,567)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value, symbol: Optional[str] = None) -> str:
    amount = Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if amount < 0 else ""
    whole, frac = f"{abs(amount):.2f}".split(".")
    sym = settings.CURRENCY_SYMBOL if symbol is None else symbol
    return f"{sign}{sym}{_group_en_in(whole)}.{frac}"


@dataclass
class Item:
    id: str
    name: str
    unit_price: Decimal
    quantity: int
    initial_quantity: Optional[int] = None

    def __post_init__(self):
        if self.initial_quantity is None:
            self.initial_quantity = self.quantity

    def calculate_current_value(self) -> Decimal:
        return self.unit_price * self.quantity

    def calculate_initial_investment(self) -> Decimal:
        return self.unit_price * self.initial_quantity

    def format_currency(self, value) -> str:
        return format_currency(value)

    def to_record(self) -> dict:
        # Decimal text keeps every digit; a float would round long prices
        return {
            "id": self.id,
            "name": self.name,
            "unitPrice": str(self.unit_price),
            "quantity": self.quantity,
            "initialQuantity": self.initial_quantity,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Item":
        if not isinstance(record, dict):
            raise InventoryError(f"Item record must be an object, got {type(record).__name__}.")
        if not record.get("id"):
            raise InventoryError("Item record has no id.")
        quantity = parse_quantity(record.get("quantity"))
        initial_raw = record.get("initialQuantity")
        item = cls(
            id=str(record["id"]),
            name=str(record.get("name") or ""),
            unit_price=parse_price(record.get("unitPrice")),
            quantity=quantity,
            initial_quantity=quantity if initial_raw is None else parse_quantity(initial_raw),
        )
        if item.quantity < 0 or item.initial_quantity < 0 or item.unit_price < 0:
            log.warning(
                "Stored item %s has negative values (price=%s, quantity=%s, initial=%s)",
                item.id, item.unit_price, item.quantity, item.initial_quantity,
            )
        return item
