from labstock.dashboard import build_rows, render
from labstock.services.inventory_service import DEMO_ITEMS


def test_build_rows_formats_values():
    rows = build_rows(DEMO_ITEMS, threshold=10)
    assert [r.status for r in rows] == ["LOW", "HEALTHY", "ZERO", "LOW", "LOW"]
    assert rows[4].unit_price == "₹35,000.00"
    assert rows[1].value == "₹11,272.50"


def test_render_includes_totals_and_alert():
    text = render(DEMO_ITEMS, threshold=10)
    assert "Oscilloscope Probe" in text
    assert "Items: 5" in text
    assert "Total value: ₹52,767.50" in text
    assert "Total investment: ₹60,272.50" in text
    assert text.endswith("ALERT: 4 items need restocking!")


def test_render_empty_store():
    text = render([], threshold=10)
    assert "Items: 0" in text
    assert text.endswith("STATUS: ALL STOCK HEALTHY")
