"""In-memory inventory store with full write-through to a storage gateway."""
from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Sequence

from labstock.errors import NotFoundError, ValidationError
from labstock.models import Item
from labstock.parsing import parse_item_fields, parse_price
from labstock.persistence import StorageGateway
from labstock.validation import validate_item_form

log = logging.getLogger(__name__)

ID_PREFIX = "ITM"
ID_FLOOR = 100
ZERO_STOCK_WARNING = "Warning: Stock already at 0."

_ID_RE = re.compile(r"^ITM(\d+)$")

DEMO_ITEMS = (
    Item("ITM100", "Oscilloscope Probe", Decimal("1250.00"), 5, 10),
    Item("ITM101", "Breadboard (Large)", Decimal("250.50"), 45, 45),
    Item("ITM102", "Power Supply Cable", Decimal("80.00"), 0, 10),
    Item("ITM103", "LED Pack (100pcs)", Decimal("35.00"), 7, 20),
    Item("ITM104", "Digital Storage Oscilloscope", Decimal("35000.00"), 1, 1),
)


@dataclass
class Adjustment:
    item: Item
    applied: bool
    warning: str = ""


def _copy(item: Item) -> Item:
    return dataclasses.replace(item)


class InventoryStore:
    """Ordered id -> Item registry. Owns its items and the id counter."""

    def __init__(self, gateway: StorageGateway, seed: Sequence[Item] = DEMO_ITEMS):
        self._gateway = gateway
        self._seed = tuple(seed)
        self._items: Dict[str, Item] = {}
        self._counter = ID_FLOOR

    # ------------------------------------------------------------------
    # Helpers
    def _persist(self) -> None:
        self._gateway.save(self._items.values())

    def _require(self, item_id: str) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError(item_id)
        return item

    def _reset_counter(self) -> None:
        highest = ID_FLOOR
        for item_id in self._items:
            m = _ID_RE.match(item_id)
            if not m:
                log.warning("Ignoring id %r when seeding the id counter", item_id)
                continue
            highest = max(highest, int(m.group(1)))
        self._counter = highest + 1

    # ------------------------------------------------------------------
    # Public API
    def load(self) -> bool:
        """Populate from storage, or install and save the demo seed.

        Returns True when persisted data was found.
        """
        stored = self._gateway.load()
        self._items.clear()
        if stored is None:
            for item in self._seed:
                self._items[item.id] = _copy(item)
            self._persist()
            log.info("No stored inventory; seeded %d demo items", len(self._items))
            found = False
        else:
            for item in stored:
                self._items[item.id] = item
            log.debug("Loaded %d items", len(self._items))
            found = True
        self._reset_counter()
        return found

    def next_id(self) -> str:
        return f"{ID_PREFIX}{self._counter}"

    def create(self, name: str, price, quantity) -> Item:
        name = (name or "").strip()
        unit_price, qty = parse_item_fields(price, quantity)
        errors = validate_item_form(name, unit_price, qty)
        if errors:
            raise ValidationError(errors)

        item = Item(self.next_id(), name, unit_price, qty, qty)
        self._counter += 1
        self._items[item.id] = item
        self._persist()
        log.debug("Created %s (%s)", item.id, item.name)
        return _copy(item)

    def update(self, item_id: str, name: str, price) -> Item:
        item = self._require(item_id)
        name = (name or "").strip()
        unit_price = parse_price(price)
        errors = validate_item_form(name, unit_price, item.quantity, check_quantity=False)
        if errors:
            raise ValidationError(errors)

        item.name = name
        item.unit_price = unit_price
        self._persist()
        log.debug("Updated %s", item_id)
        return _copy(item)

    def adjust_quantity(self, item_id: str, delta: int) -> Adjustment:
        if isinstance(delta, bool) or delta not in (1, -1):
            raise ValueError("delta must be +1 or -1")
        item = self._require(item_id)
        if delta == 1:
            item.quantity += 1
            item.initial_quantity += 1
        elif item.quantity == 0:
            log.warning("Refusing to decrement %s below zero", item_id)
            return Adjustment(_copy(item), applied=False, warning=ZERO_STOCK_WARNING)
        else:
            item.quantity -= 1
        self._persist()
        return Adjustment(_copy(item), applied=True)

    def delete(self, item_id: str) -> bool:
        if self._items.pop(item_id, None) is None:
            return False
        self._persist()
        log.debug("Deleted %s", item_id)
        return True

    # ------------------------------------------------------------------
    # Read access (copies only)
    def items(self) -> List[Item]:
        return [_copy(item) for item in self._items.values()]

    def get(self, item_id: str) -> Optional[Item]:
        item = self._items.get(item_id)
        return _copy(item) if item is not None else None

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items())
