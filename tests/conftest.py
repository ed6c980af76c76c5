# stockledger/tests/conftest.py
# ---------------------------------------------------------------------
# In-memory stand-ins for the remote store:
# - FakeInventoryAccessor / FakeTransactionAccessor expose the same
#   methods the sync engine calls on the real accessors
# - failures are injected per call type (fail_fetch / fail_update / ...)
# - every inventory write is recorded in `writes` as (id, quantity)
# ---------------------------------------------------------------------

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Optional, Set, Tuple

import pytest

from stockledger.core.errors import ApiError, NotFoundError, TransactionPersistenceFailedError
from stockledger.schemas.inventory import InventoryItem
from stockledger.schemas.transactions import Transaction, TransactionCreate, TransactionUpdate
from stockledger.services.sync import InventorySyncEngine


class FakeInventoryAccessor:
    def __init__(self):
        self.items: Dict[int, InventoryItem] = {}
        self.writes: List[Tuple[int, Decimal]] = []
        self.fetches: List[int] = []
        self.fail_fetch: Set[int] = set()
        self.fail_update: Set[int] = set()

    def add(self, item_id: int, quantity, name: str = "Item", category_id: int = 1, weight_id: int = 1):
        self.items[item_id] = InventoryItem(
            id=item_id, name=name, quantity=quantity, category_id=category_id, weight_id=weight_id
        )
        return self.items[item_id]

    def quantity(self, item_id: int) -> Decimal:
        return self.items[item_id].quantity

    def list(self, skip=None, limit=None):
        return list(self.items.values())

    def fetch_by_id(self, inventory_id: int) -> InventoryItem:
        self.fetches.append(inventory_id)
        if inventory_id in self.fail_fetch:
            raise ApiError("HTTP 500 Internal Server Error", status=500)
        if inventory_id not in self.items:
            raise NotFoundError(f"GET /inventory/{inventory_id} not found")
        return self.items[inventory_id].model_copy()

    def apply_quantity(self, item: InventoryItem, new_quantity: Decimal) -> InventoryItem:
        if item.id in self.fail_update:
            raise ApiError("HTTP 503 Service Unavailable", status=503)
        self.writes.append((item.id, new_quantity))
        self.items[item.id] = item.model_copy(update={"quantity": new_quantity})
        return self.items[item.id]


class FakeTransactionAccessor:
    def __init__(self):
        self.records: Dict[int, Transaction] = {}
        self.next_id = 1
        self.fail_create = False
        self.fail_update = False
        self.fail_delete = False
        self.calls: List[str] = []

    def add(self, **fields) -> Transaction:
        tx_id = fields.pop("id", None) or self.next_id
        self.next_id = max(self.next_id, tx_id + 1)
        data = {"title": "Tx", "owner_id": 1, "date": "2025-10-21", "amount_per_unit": "1.00"}
        data.update(fields)
        self.records[tx_id] = Transaction(id=tx_id, **data)
        return self.records[tx_id]

    def list(self, skip=None, limit=None) -> List[Transaction]:
        return list(self.records.values())

    def search(self, filters) -> List[Transaction]:
        rows = self.list()
        if filters.owner_id is not None:
            rows = [r for r in rows if str(r.owner_id) == str(filters.owner_id)]
        return rows

    def fetch_by_id(self, transaction_id: int) -> Transaction:
        self.calls.append("fetch")
        if transaction_id not in self.records:
            raise NotFoundError(f"GET /transactions/{transaction_id} not found")
        return self.records[transaction_id]

    def create(self, payload: TransactionCreate) -> Transaction:
        self.calls.append("create")
        if self.fail_create:
            raise TransactionPersistenceFailedError("Failed to create transaction: HTTP 500", status=500)
        data = payload.model_dump()
        data["total_amount"] = payload.amount_per_unit * payload.quantity
        tx = Transaction(id=self.next_id, **data)
        self.records[tx.id] = tx
        self.next_id += 1
        return tx

    def update(self, transaction_id: int, payload: TransactionUpdate) -> Transaction:
        self.calls.append("update")
        if self.fail_update:
            raise TransactionPersistenceFailedError("Failed to update transaction: HTTP 500", status=500)
        current = self.records[transaction_id]
        updated = current.model_copy(update=payload.model_dump(exclude_unset=True))
        self.records[transaction_id] = updated
        return updated

    def delete(self, transaction_id: int) -> None:
        self.calls.append("delete")
        if self.fail_delete:
            raise TransactionPersistenceFailedError("Failed to delete transaction: HTTP 500", status=500)
        self.records.pop(transaction_id)


@pytest.fixture
def inventory() -> FakeInventoryAccessor:
    return FakeInventoryAccessor()


@pytest.fixture
def transactions() -> FakeTransactionAccessor:
    return FakeTransactionAccessor()


@pytest.fixture
def engine(inventory, transactions) -> InventorySyncEngine:
    return InventorySyncEngine(inventory, transactions)


def tx_payload(**overrides) -> TransactionCreate:
    data = {
        "title": "Sale",
        "owner_id": 1,
        "amount_per_unit": "15.50",
        "quantity": 1,
        "transaction_type": "expense",
        "date": "2025-10-21",
    }
    data.update(overrides)
    return TransactionCreate(**data)


def Q(value) -> Optional[Decimal]:
    return None if value is None else Decimal(str(value))
