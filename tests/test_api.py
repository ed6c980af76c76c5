from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from stockledger.main import app
from stockledger.schemas.categories import Category
from stockledger.schemas.weights import Weight
from stockledger.services.deps import (
    get_category_accessor,
    get_inventory_accessor,
    get_status_monitor,
    get_transaction_accessor,
    get_weight_accessor,
)
from stockledger.services.status import InventoryStatusMonitor


class StubNames:
    def __init__(self, rows):
        self.rows = rows

    def list(self, skip=None, limit=None):
        return self.rows


@pytest.fixture
def monitor(inventory):
    return InventoryStatusMonitor(inventory, threshold=3, poll_interval=0)


@pytest.fixture
def api(inventory, transactions, monitor):
    app.dependency_overrides[get_inventory_accessor] = lambda: inventory
    app.dependency_overrides[get_transaction_accessor] = lambda: transactions
    app.dependency_overrides[get_status_monitor] = lambda: monitor
    app.dependency_overrides[get_category_accessor] = lambda: StubNames([Category(id=1, name="LPG")])
    app.dependency_overrides[get_weight_accessor] = lambda: StubNames([Weight(id=1, name="11kg")])
    yield TestClient(app)
    app.dependency_overrides.clear()


def _body(**overrides):
    body = {
        "title": "Sale",
        "owner_id": 1,
        "transaction_type": "earning",
        "amount_per_unit": "15.50",
        "quantity": 10,
        "date": "2025-10-21",
        "inventory_id": 1,
    }
    body.update(overrides)
    return body


def test_create_sale_then_reject_oversale(api, inventory):
    inventory.add(1, 100)

    resp = api.post("/transactions/", json=_body())
    assert resp.status_code == 201
    data = resp.json()
    assert data["transaction"]["total_amount"] == "155.00"
    assert data["warnings"] == []
    assert inventory.quantity(1) == 90

    resp = api.post("/transactions/", json=_body(quantity=95))
    assert resp.status_code == 400
    assert resp.json()["detail"] == {
        "message": "Insufficient inventory. Available: 90, Requested: 95",
        "available": "90",
        "requested": "95",
    }
    assert inventory.quantity(1) == 90


def test_create_returns_stock_warning(api, inventory, transactions):
    inventory.add(1, 100)
    inventory.fail_update.add(1)

    resp = api.post("/transactions/", json=_body(transaction_type="expense", quantity=1))

    assert resp.status_code == 201
    assert resp.json()["warnings"][0].startswith("Inventory update failed")
    assert len(transactions.records) == 1


def test_update_and_delete_go_through_engine(api, inventory, transactions):
    # expense of 5 already booked: 100 -> 105
    inventory.add(1, 105)
    tx = transactions.add(transaction_type="expense", quantity=5, inventory_id=1)

    resp = api.put(f"/transactions/{tx.id}", json={"transaction_type": "earning"})
    assert resp.status_code == 200
    assert resp.json()["transaction"]["transaction_type"] == "earning"
    assert inventory.quantity(1) == 95

    resp = api.delete(f"/transactions/{tx.id}")
    assert resp.status_code == 204
    assert inventory.quantity(1) == 100


def test_missing_transaction_is_404(api):
    assert api.put("/transactions/77", json={"quantity": 1}).status_code == 404
    resp = api.delete("/transactions/77")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Transaction not found"


def test_delete_blocked_by_inventory_failure(api, inventory, transactions):
    inventory.add(1, 100)
    inventory.fail_update.add(1)
    tx = transactions.add(transaction_type="expense", quantity=5, inventory_id=1)

    resp = api.delete(f"/transactions/{tx.id}")

    assert resp.status_code == 400
    assert tx.id in transactions.records


def test_status_snapshot_follows_stock_changes(api, inventory):
    inventory.add(1, 3)

    assert api.get("/inventory/status").json()["loading"] is True

    api.post("/transactions/", json=_body(quantity=3))
    status = api.get("/inventory/status").json()

    assert status["out_of_stock_count"] == 1
    assert status["out_of_stock_items"][0]["id"] == 1
    assert status["loading"] is False


def test_status_with_custom_threshold(api, inventory):
    inventory.add(1, 8)
    inventory.add(2, 0)

    status = api.get("/inventory/status", params={"threshold": 10}).json()

    assert (status["out_of_stock_count"], status["low_stock_count"]) == (1, 1)


def test_inventory_chart(api, inventory):
    inventory.add(1, "4.5", name="LPG 11kg")

    resp = api.get("/analytics/inventory")

    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "name": "LPG 11kg", "quantity": 4.5, "category_name": "LPG", "weight_name": "11kg"}
    ]


def test_daily_totals(api, transactions):
    transactions.add(transaction_type="expense", total_amount="12.00", date="2025-10-02")
    transactions.add(transaction_type="earning", total_amount="30.00", date="2025-10-02")

    resp = api.get("/analytics/daily-totals", params={"month": "2025-10", "transaction_type": "expense"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["month_total"] == "12.00"
    assert body["points"] == [{"day": "2025-10-02", "total": "12.00"}]
    assert api.get("/analytics/daily-totals", params={"month": "October"}).status_code == 400


def test_daily_totals_without_type_covers_every_type(api, transactions):
    transactions.add(transaction_type="expense", total_amount="12.00", date="2025-10-02")
    transactions.add(transaction_type="earning", total_amount="30.00", date="2025-10-02")

    body = api.get("/analytics/daily-totals", params={"month": "2025-10"}).json()

    assert body["transaction_type"] is None
    assert body["month_total"] == "42.00"
    assert body["points"] == [{"day": "2025-10-02", "total": "42.00"}]
