"""Plain-text dashboard: the table rows and header metrics for a store snapshot."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from labstock.metrics import InventorySummary, low_stock_message, stock_status, summarize
from labstock.models import Item, format_currency

COLUMNS = ("ID", "NAME", "UNIT PRICE", "STATUS", "QTY", "VALUE")


@dataclass(frozen=True)
class DashboardRow:
    id: str
    name: str
    unit_price: str
    status: str
    quantity: int
    value: str


def build_rows(items: Iterable[Item], threshold: Optional[int] = None) -> List[DashboardRow]:
    rows = []
    for item in items:
        rows.append(
            DashboardRow(
                id=item.id,
                name=item.name,
                unit_price=format_currency(item.unit_price),
                status=stock_status(item.quantity, threshold).label,
                quantity=item.quantity,
                value=format_currency(item.calculate_current_value()),
            )
        )
    return rows


def render(items: Iterable[Item], threshold: Optional[int] = None) -> str:
    items = list(items)
    summary: InventorySummary = summarize(items, threshold)
    table = [COLUMNS] + [
        (r.id, r.name, r.unit_price, r.status, str(r.quantity), r.value)
        for r in build_rows(items, threshold)
    ]
    widths = [max(len(row[i]) for row in table) for i in range(len(COLUMNS))]
    lines = ["  ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip() for row in table]
    lines.append("")
    lines.append(f"Items: {summary.item_count}")
    lines.append(f"Total value: {format_currency(summary.total_current_value)}")
    lines.append(f"Total investment: {format_currency(summary.total_investment)}")
    lines.append(low_stock_message(summary.low_stock_count))
    return "\n".join(lines)
