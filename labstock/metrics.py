"""Derived values over a set of items: totals, stock status and alerts.

Everything here is recomputed on demand from whatever items the caller passes
in; nothing is cached.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from labstock.core.config import settings
from labstock.models import Item


def _threshold(threshold: Optional[int]) -> int:
    # LABSTOCK_LOW_STOCK_THRESHOLD, 10 by default
    return settings.LOW_STOCK_THRESHOLD if threshold is None else threshold


class StockStatus(enum.Enum):
    ZERO = "ZERO"
    LOW = "LOW"
    HEALTHY = "HEALTHY"

    @property
    def label(self) -> str:
        return self.value

    @property
    def css_class(self) -> str:
        return self.value.lower()


@dataclass(frozen=True)
class InventorySummary:
    item_count: int
    total_current_value: Decimal
    total_investment: Decimal
    low_stock_count: int


def total_current_value(items: Iterable[Item]) -> Decimal:
    return sum((item.calculate_current_value() for item in items), Decimal("0"))


def total_investment(items: Iterable[Item]) -> Decimal:
    return sum((item.calculate_initial_investment() for item in items), Decimal("0"))


def stock_status(quantity: int, threshold: Optional[int] = None) -> StockStatus:
    if quantity == 0:
        return StockStatus.ZERO
    if quantity < _threshold(threshold):
        return StockStatus.LOW
    return StockStatus.HEALTHY


def low_stock_count(items: Iterable[Item], threshold: Optional[int] = None) -> int:
    # Zero-quantity items count as low here even though stock_status says ZERO.
    limit = _threshold(threshold)
    return sum(1 for item in items if item.quantity < limit)


def low_stock_message(count: int) -> str:
    if count > 0:
        return f"ALERT: {count} items need restocking!"
    return "STATUS: ALL STOCK HEALTHY"


def summarize(items: Iterable[Item], threshold: Optional[int] = None) -> InventorySummary:
    items = list(items)
    return InventorySummary(
        item_count=len(items),
        total_current_value=total_current_value(items),
        total_investment=total_investment(items),
        low_stock_count=low_stock_count(items, threshold),
    )
