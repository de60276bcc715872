# labstock/dev_check.py
from labstock.errors import InventoryError
from labstock.geo import EnvPositionProvider, GeoAdvisory
from labstock.metrics import low_stock_count, low_stock_message, summarize
from labstock.persistence import SqlSlotGateway
from labstock.services.inventory_service import InventoryStore


def main():
    store = InventoryStore(SqlSlotGateway())
    found = store.load()
    print("Loaded stored data:" if found else "Seeded demo data:", len(store), "items")
    try:
        item = store.create("Resistor Kit", "45.00", "20")
        print("Created:", item)
        print("Restocked:", store.adjust_quantity(item.id, +1).item)
    except InventoryError as exc:
        print("Inventory error:", exc)
    try:
        store.create("ab", "free", "-1")
    except InventoryError as exc:
        print("Rejected:", exc.messages)

    summary = summarize(store.items())
    print("Summary:", summary)
    print(low_stock_message(low_stock_count(store.items())))

    try:
        report = GeoAdvisory(EnvPositionProvider()).locate("Resistor Kit")
        print(f"Distance from {report.reference.name}: {report.distance_km} KM")
        print("Suppliers:", report.supplier_search_url)
    except InventoryError as exc:
        print("Geo error:", exc)


if __name__ == "__main__":
    main()
