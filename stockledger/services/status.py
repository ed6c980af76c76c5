"""
Stock alerts: out-of-stock (quantity == 0) and low-stock (0 < quantity <= threshold).

The monitor keeps only the last snapshot in memory. It re-evaluates on a fixed
interval in a background thread and whenever `refresh()` is called (the sync
engine calls it after every stock change).
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from pydantic import ValidationError

from ..core.config import settings
from ..core.errors import ApiError
from ..core.quantity import ZERO, to_number
from ..schemas.inventory import InventoryItem, InventoryStatus
from .inventory import InventoryAccessor

logger = logging.getLogger(__name__)


def classify(items: Iterable[InventoryItem], threshold) -> InventoryStatus:
    limit = to_number(threshold)
    out_of_stock = []
    low_stock = 0
    for item in items:
        qty = to_number(item.quantity)
        if qty == ZERO:
            out_of_stock.append(item)
        elif ZERO < qty <= limit:
            low_stock += 1
    return InventoryStatus(
        out_of_stock_count=len(out_of_stock),
        low_stock_count=low_stock,
        out_of_stock_items=out_of_stock,
        threshold=limit,
        loading=False,
    )


class InventoryStatusMonitor:
    def __init__(
        self,
        inventory: InventoryAccessor,
        threshold=None,
        poll_interval: Optional[float] = None,
    ):
        self.inventory = inventory
        self.threshold = to_number(settings.low_stock_threshold if threshold is None else threshold)
        self.poll_interval = settings.status_poll_interval if poll_interval is None else poll_interval
        self._snapshot = InventoryStatus(threshold=self.threshold, loading=True)
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def snapshot(self) -> InventoryStatus:
        return self._snapshot

    def refresh(self) -> InventoryStatus:
        try:
            items = self.inventory.list()
        except ApiError as e:
            # keep the previous figures, just stop showing "loading"
            logger.warning("Inventory status check failed: %s", e.message)
            return self._keep_previous()
        except ValidationError as e:
            logger.warning("Inventory status check got a malformed record: %s", e)
            return self._keep_previous()
        self._snapshot = classify(items, self.threshold)
        return self._snapshot

    def _keep_previous(self) -> InventoryStatus:
        self._snapshot = self._snapshot.model_copy(update={"loading": False})
        return self._snapshot

    def _run(self) -> None:
        self.refresh()
        while not self._stop.wait(self.poll_interval):
            self.refresh()

    def start(self) -> None:
        if self.poll_interval <= 0:
            self.refresh()
            return
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._run, name="inventory-status", daemon=True)
        self._thread.start()

    def stop(self, timeout: Optional[float] = 5.0) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
