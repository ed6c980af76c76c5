"""
Inventory sync engine.

Keeps each inventory item's quantity in line with the transactions recorded
against it. The remote store has no cross-resource transactions, so every
operation is a sequence of single-resource writes with explicit compensations:

- create: the transaction record wins. Inventory is pre-validated for sales,
  but once the record exists a failed stock adjustment is only a warning.
- update: the old stock effect is reversed and the new one applied before the
  record is written; a failed step puts the original effect back.
- delete: the stock effect is reversed first; if that fails the record stays.

Every write is preceded by a fresh read. There is no locking: two callers
adjusting the same item at the same time can overwrite each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, List, Optional

from pydantic import ValidationError

from ..core.errors import (
    ApiError,
    InsufficientInventoryError,
    InventoryUpdateFailedError,
    NotFoundError,
)
from ..core.quantity import EARNING, ZERO, reverse_type, signed_delta, to_number
from ..schemas.transactions import Transaction, TransactionCreate, TransactionUpdate
from .inventory import InventoryAccessor
from .transactions import TransactionAccessor

logger = logging.getLogger(__name__)


@dataclass
class StepResult:
    """Outcome of one stock adjustment against one inventory item."""

    success: bool
    inventory_id: Optional[int] = None
    previous_quantity: Optional[Decimal] = None
    new_quantity: Optional[Decimal] = None
    error: Optional[ApiError] = None

    @property
    def changed(self) -> bool:
        return self.success and self.previous_quantity != self.new_quantity


@dataclass
class SyncResult:
    """What the caller gets back: success flag + message, never an exception."""

    success: bool
    message: str = ""
    data: Any = None
    error: Optional[ApiError] = None
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, message: str, data: Any = None, warnings: Optional[List[str]] = None) -> "SyncResult":
        return cls(success=True, message=message, data=data, warnings=warnings or [])

    @classmethod
    def fail(cls, error: ApiError) -> "SyncResult":
        return cls(success=False, message=error.message, error=error)


@dataclass(frozen=True)
class StockEffect:
    """The stock change a transaction stands for (item, type, quantity)."""

    inventory_id: Optional[int]
    transaction_type: str
    quantity: Decimal

    @classmethod
    def of(cls, tx: Transaction) -> "StockEffect":
        return cls(tx.inventory_id, tx.transaction_type, to_number(tx.quantity))

    @property
    def applies(self) -> bool:
        return self.inventory_id is not None and self.quantity > ZERO

    def reversed(self) -> "StockEffect":
        return StockEffect(self.inventory_id, reverse_type(self.transaction_type), self.quantity)


class InventorySyncEngine:
    def __init__(
        self,
        inventory: InventoryAccessor,
        transactions: TransactionAccessor,
        on_inventory_change: Optional[Callable[[], Any]] = None,
    ):
        self.inventory = inventory
        self.transactions = transactions
        self.on_inventory_change = on_inventory_change

    # ----------------------------
    # Steps
    # ----------------------------

    def apply_effect(self, effect: StockEffect) -> StepResult:
        """Fetch the item, compute the new quantity, validate it, write it back."""
        delta = signed_delta(effect.transaction_type, effect.quantity)
        logger.info(
            "[apply_effect] inventory_id=%s type=%s qty=%s delta=%s",
            effect.inventory_id, effect.transaction_type, effect.quantity, delta,
        )

        try:
            item = self.inventory.fetch_by_id(effect.inventory_id)
        except NotFoundError:
            return StepResult(False, effect.inventory_id, error=NotFoundError("Inventory not found"))
        except ApiError as e:
            logger.error("[apply_effect] Failed to fetch inventory %s: %s", effect.inventory_id, e.message)
            return StepResult(
                False,
                effect.inventory_id,
                error=InventoryUpdateFailedError(f"Failed to fetch inventory: {e.message}", payload=e.payload),
            )
        except ValidationError as e:
            logger.error("[apply_effect] Malformed inventory record %s: %s", effect.inventory_id, e)
            return StepResult(
                False,
                effect.inventory_id,
                error=InventoryUpdateFailedError("Failed to fetch inventory: malformed record"),
            )

        current = to_number(item.quantity)
        new_quantity = current + delta
        if new_quantity < ZERO:
            if delta < ZERO:
                error = InsufficientInventoryError(current, effect.quantity)
            else:
                # stock was already below zero in the store
                error = InventoryUpdateFailedError(
                    f"Inventory quantity would stay negative: {current} -> {new_quantity}"
                )
            logger.error("[apply_effect] %s", error.message)
            return StepResult(False, item.id, current, current, error=error)

        if new_quantity == current:
            logger.info("[apply_effect] No quantity change needed")
            return StepResult(True, item.id, current, current)

        try:
            self.inventory.apply_quantity(item, new_quantity)
        except ApiError as e:
            logger.error("[apply_effect] Update failed: %s", e.message)
            return StepResult(
                False,
                item.id,
                current,
                current,
                error=InventoryUpdateFailedError(e.message or "Inventory update failed", payload=e.payload),
            )
        except ValidationError as e:
            logger.error("[apply_effect] Update rejected: %s", e)
            return StepResult(
                False, item.id, current, current, error=InventoryUpdateFailedError("Inventory update rejected")
            )

        logger.info("[apply_effect] inventory %s: %s -> %s", item.id, current, new_quantity)
        return StepResult(True, item.id, current, new_quantity)

    def _compensate(self, effect: StockEffect, context: str) -> StepResult:
        """Best-effort rollback step; a failure here is logged, not raised."""
        step = self.apply_effect(effect)
        if not step.success:
            logger.error(
                "[%s] Compensation failed for inventory %s (%s %s): %s",
                context, effect.inventory_id, effect.transaction_type, effect.quantity,
                step.error.message if step.error else "unknown error",
            )
        return step

    def _inventory_changed(self) -> None:
        if self.on_inventory_change is not None:
            self.on_inventory_change()

    def _fetch_transaction(self, transaction_id: int) -> Transaction:
        try:
            return self.transactions.fetch_by_id(transaction_id)
        except NotFoundError as e:
            raise NotFoundError("Transaction not found", payload=e.payload) from e

    # ----------------------------
    # Operations
    # ----------------------------

    def create(self, payload: TransactionCreate) -> SyncResult:
        effect = StockEffect(payload.inventory_id, payload.transaction_type, to_number(payload.quantity))

        if not effect.applies:
            logger.info("[create] No inventory update needed (inventory_id=%s, quantity=%s)",
                        payload.inventory_id, payload.quantity)
        elif effect.transaction_type == EARNING:
            # Fail fast: nothing has been written yet.
            try:
                item = self.inventory.fetch_by_id(effect.inventory_id)
            except NotFoundError:
                return SyncResult.fail(NotFoundError("Inventory not found"))
            except ApiError as e:
                return SyncResult.fail(e)
            except ValidationError:
                return SyncResult.fail(InventoryUpdateFailedError("Failed to fetch inventory: malformed record"))
            available = to_number(item.quantity)
            if available < effect.quantity:
                logger.info("[create] Rejected sale: available=%s, requested=%s", available, effect.quantity)
                return SyncResult.fail(InsufficientInventoryError(available, effect.quantity))

        try:
            created = self.transactions.create(payload)
        except ApiError as e:
            logger.error("[create] Transaction create failed: %s", e.message)
            return SyncResult.fail(e)
        logger.info("[create] Transaction %s created", created.id)

        warnings: List[str] = []
        if effect.applies:
            step = self.apply_effect(effect)
            if step.success:
                if step.changed:
                    self._inventory_changed()
            else:
                # The transaction stays; inventory catches up later (or by hand).
                msg = f"Inventory update failed: {step.error.message if step.error else 'unknown error'}"
                logger.warning("[create] %s", msg)
                warnings.append(msg)

        return SyncResult.ok("Transaction created", data=created, warnings=warnings)

    def update(self, transaction_id: int, payload: TransactionUpdate) -> SyncResult:
        try:
            existing = self._fetch_transaction(transaction_id)
        except ApiError as e:
            return SyncResult.fail(e)

        old = StockEffect.of(existing)
        new = StockEffect(
            payload.inventory_id if payload.provided("inventory_id") else existing.inventory_id,
            payload.transaction_type or existing.transaction_type,
            to_number(payload.quantity) if payload.quantity is not None else old.quantity,
        )

        # Stock side is only touched when a stock-relevant field changes.
        adjust = old != new and (old.applies or new.applies)
        reversed_old = False

        if adjust and old.applies:
            step = self.apply_effect(old.reversed())
            if not step.success:
                return SyncResult.fail(step.error)
            reversed_old = True

        if adjust and new.applies:
            step = self.apply_effect(new)
            if not step.success:
                if reversed_old:
                    self._compensate(old, "update")
                return SyncResult.fail(step.error)

        try:
            updated = self.transactions.update(transaction_id, payload)
        except ApiError as e:
            logger.error("[update] Transaction update failed: %s", e.message)
            if adjust:
                # Undo in reverse order: drop the new effect, restore the old one.
                if new.applies:
                    self._compensate(new.reversed(), "update")
                if reversed_old:
                    self._compensate(old, "update")
            return SyncResult.fail(e)

        if adjust:
            self._inventory_changed()
        return SyncResult.ok("Transaction updated", data=updated)

    def delete(self, transaction_id: int) -> SyncResult:
        try:
            existing = self._fetch_transaction(transaction_id)
        except ApiError as e:
            return SyncResult.fail(e)

        old = StockEffect.of(existing)
        if old.applies:
            step = self.apply_effect(old.reversed())
            if not step.success:
                # The record must not go away while its stock effect is still in place.
                return SyncResult.fail(step.error)

        try:
            self.transactions.delete(transaction_id)
        except ApiError as e:
            logger.error("[delete] Transaction delete failed: %s", e.message)
            if old.applies:
                self._compensate(old, "delete")
            return SyncResult.fail(e)

        if old.applies:
            self._inventory_changed()
        return SyncResult.ok("Transaction deleted", data=True)
