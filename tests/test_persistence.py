import json
from decimal import Decimal

import pytest

from labstock.errors import InventoryError
from labstock.models import Item, StorageSlot
from labstock.persistence import MemoryGateway, SqlSlotGateway, deserialize_items, serialize_items
from labstock.services.inventory_service import DEMO_ITEMS, InventoryStore

ITEMS = [
    Item("ITM120", "Capacitor Assortment", Decimal("0.1"), 300, 320),
    Item("ITM105", "Heat Shrink", Decimal("149.99"), 0, 12),
    Item("ITM130", "Logic Analyzer", Decimal("8999"), 2, 2),
]


def test_empty_slot_loads_none(gateway):
    assert gateway.load() is None


def test_sql_round_trip_preserves_order_and_values(gateway):
    gateway.save(ITEMS)
    assert gateway.load() == ITEMS


def test_save_overwrites_single_slot(gateway, session_factory):
    gateway.save(DEMO_ITEMS)
    gateway.save(ITEMS[:1])
    with session_factory() as session:
        assert session.query(StorageSlot).count() == 1
    assert gateway.load() == ITEMS[:1]


def test_slots_are_keyed(session_factory):
    a = SqlSlotGateway(session_factory=session_factory, key="a")
    b = SqlSlotGateway(session_factory=session_factory, key="b")
    a.save(ITEMS)
    assert b.load() is None


def test_memory_round_trip():
    gateway = MemoryGateway()
    gateway.save(DEMO_ITEMS)
    assert gateway.load() == list(DEMO_ITEMS)


def test_serialized_record_shape():
    records = json.loads(serialize_items(ITEMS[:1]))
    assert records == [
        {"id": "ITM120", "name": "Capacitor Assortment", "unitPrice": "0.1", "quantity": 300, "initialQuantity": 320}
    ]


def test_corrupt_payload_raises(session_factory):
    with session_factory() as session:
        session.add(StorageSlot(key="labInventoryData", value="{not json"))
        session.commit()
    with pytest.raises(InventoryError):
        SqlSlotGateway(session_factory=session_factory).load()


def test_non_list_payload_raises():
    with pytest.raises(InventoryError):
        deserialize_items('{"id": "ITM100"}')


def test_long_prices_survive_a_round_trip(gateway):
    store = InventoryStore(gateway, seed=())
    store.load()
    store.create("Precision Ref", "1234567890.123456789", "3")

    reloaded = gateway.load()
    assert reloaded == store.items()
    assert reloaded[0].unit_price == Decimal("1234567890.123456789")

    memory = MemoryGateway()
    memory.save(store.items())
    assert memory.load() == store.items()


def test_numeric_prices_from_older_saves_still_load():
    items = deserialize_items('[{"id": "ITM100", "name": "Probe", "unitPrice": 1250.5, "quantity": 5}]')
    assert items[0].unit_price == Decimal("1250.5")


@pytest.mark.parametrize("payload", [
    "[1]",
    '[{"name": "x", "unitPrice": 1, "quantity": 1}]',
    '[{"id": "ITM100", "name": "x", "unitPrice": "cheap", "quantity": 1}]',
])
def test_malformed_records_raise_inventory_error(payload):
    with pytest.raises(InventoryError):
        deserialize_items(payload)


def test_sql_gateway_reports_malformed_records(session_factory):
    with session_factory() as session:
        session.add(StorageSlot(key="labInventoryData", value="[1]"))
        session.commit()
    with pytest.raises(InventoryError):
        SqlSlotGateway(session_factory=session_factory).load()


def test_from_url_creates_slot_table(tmp_path):
    gateway = SqlSlotGateway.from_url(f"sqlite:///{tmp_path / 'slots.sqlite3'}")
    assert gateway.load() is None
    gateway.save(ITEMS)
    assert gateway.load() == ITEMS
