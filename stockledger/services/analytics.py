"""Derived figures for the expense/revenue graph and the inventory quantity chart."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ..core.quantity import ZERO, to_number
from ..schemas.analytics import DailyPoint, InventoryPoint, MonthlyTotals
from ..schemas.inventory import InventoryItem
from ..schemas.transactions import Transaction


def parse_day(value) -> Optional[date]:
    """Calendar day of a date or timestamp string (anything ISO-like); None if unusable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        return None


def parse_month(value: str) -> date:
    """'YYYY-MM' (or any ISO date) -> first day of that month."""
    v = (value or "").strip()
    if len(v) == 7:
        v = f"{v}-01"
    d = date.fromisoformat(v[:10])
    return d.replace(day=1)


def daily_totals(
    transactions: Iterable[Transaction],
    month: date,
    transaction_type: Optional[str] = None,
    owner_id=None,
) -> MonthlyTotals:
    month = month.replace(day=1)
    buckets: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    total = ZERO
    for tx in transactions:
        day = parse_day(tx.date)
        if day is None or (day.year, day.month) != (month.year, month.month):
            continue
        if transaction_type and tx.transaction_type != transaction_type:
            continue
        if owner_id is not None and str(tx.owner_id) != str(owner_id):
            continue
        amount = to_number(tx.total_amount)
        total += amount
        buckets[day.isoformat()] += amount

    return MonthlyTotals(
        month=month.strftime("%Y-%m"),
        transaction_type=transaction_type,
        owner_id=str(owner_id) if owner_id is not None else None,
        month_total=total,
        points=[DailyPoint(day=k, total=v) for k, v in sorted(buckets.items())],
    )


def inventory_chart(
    items: Iterable[InventoryItem],
    category_id: Optional[int] = None,
    weight_id: Optional[int] = None,
    category_names: Optional[Dict[int, str]] = None,
    weight_names: Optional[Dict[int, str]] = None,
) -> List[InventoryPoint]:
    category_names = category_names or {}
    weight_names = weight_names or {}
    out: List[InventoryPoint] = []
    for it in items:
        if category_id is not None and it.category_id != category_id:
            continue
        if weight_id is not None and it.weight_id != weight_id:
            continue
        out.append(
            InventoryPoint(
                id=it.id,
                name=it.name,
                quantity=to_number(it.quantity),
                category_name=it.category_name or category_names.get(it.category_id),
                weight_name=it.weight_name or weight_names.get(it.weight_id),
            )
        )
    return out
