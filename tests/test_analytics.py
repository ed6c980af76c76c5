from datetime import date
from decimal import Decimal

import pytest

from stockledger.schemas.inventory import InventoryItem
from stockledger.schemas.transactions import Transaction
from stockledger.services.analytics import daily_totals, inventory_chart, parse_day, parse_month


def _tx(i, day, tx_type="expense", total="10.00", owner=1):
    return Transaction(
        id=i, title=f"T{i}", owner_id=owner, transaction_type=tx_type,
        total_amount=total, date=day,
    )


def test_daily_totals_groups_by_day_within_month():
    rows = [
        _tx(1, "2025-10-02", total="5.50"),
        _tx(2, "2025-10-02T18:30:00Z", total=4.5),
        _tx(3, "2025-10-15", total="20"),
        _tx(4, "2025-11-01", total="99"),
        _tx(5, "2025-09-30", total="99"),
        _tx(6, "2025-10-03", tx_type="earning", total="7"),
        _tx(7, "not-a-date", total="99"),
    ]

    result = daily_totals(rows, date(2025, 10, 17), transaction_type="expense")

    assert result.month == "2025-10"
    assert result.month_total == Decimal("30.00")
    assert [(p.day, p.total) for p in result.points] == [
        ("2025-10-02", Decimal("10.00")),
        ("2025-10-15", Decimal("20")),
    ]


def test_daily_totals_filters_by_owner_and_all_types():
    rows = [
        _tx(1, "2025-10-02", tx_type="expense", owner=1),
        _tx(2, "2025-10-02", tx_type="earning", owner=1),
        _tx(3, "2025-10-02", tx_type="earning", owner=2),
    ]

    result = daily_totals(rows, date(2025, 10, 1), owner_id="1")

    assert result.month_total == Decimal("20.00")
    assert result.owner_id == "1"


def test_parse_helpers():
    assert parse_day("2025-10-21T10:00:00+02:00") == date(2025, 10, 21)
    assert parse_day(None) is None
    assert parse_day("garbage") is None
    assert parse_month("2025-02") == date(2025, 2, 1)
    assert parse_month("2025-02-17") == date(2025, 2, 1)
    with pytest.raises(ValueError):
        parse_month("Feb")


def test_inventory_chart_filters_and_resolves_names():
    items = [
        InventoryItem(id=1, name="LPG 11kg", quantity="4", category_id=1, weight_id=1),
        InventoryItem(id=2, name="Beer 500ml", quantity=12, category_id=5, weight_id=4, weight_name="500ml"),
        InventoryItem(id=3, name="Beer 1L", quantity=0, category_id=5, weight_id=7),
    ]

    points = inventory_chart(items, category_id=5, category_names={5: "Beer"}, weight_names={7: "1L"})

    assert [(p.id, p.quantity, p.category_name, p.weight_name) for p in points] == [
        (2, Decimal("12"), "Beer", "500ml"),
        (3, Decimal("0"), "Beer", "1L"),
    ]
    assert [p.id for p in inventory_chart(items, weight_id=1)] == [1]
