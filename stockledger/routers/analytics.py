from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..core.errors import ApiError
from ..schemas.analytics import InventoryPoint, MonthlyTotals
from ..schemas.common import EntityId
from ..schemas.transactions import TransactionSearch, TransactionType
from ..services.analytics import daily_totals, inventory_chart, parse_month
from ..services.categories import CategoryAccessor
from ..services.deps import (
    get_category_accessor,
    get_inventory_accessor,
    get_transaction_accessor,
    get_weight_accessor,
)
from ..services.inventory import InventoryAccessor
from ..services.transactions import TransactionAccessor
from ..services.weights import WeightAccessor
from .errors import http_error

router = APIRouter()


@router.get("/daily-totals", response_model=MonthlyTotals)
def get_daily_totals(
    month: Optional[str] = Query(None, description="YYYY-MM, defaults to the current month"),
    transaction_type: Optional[TransactionType] = Query(None, description="Omit for all types"),
    owner_id: Optional[EntityId] = Query(None),
    transactions: TransactionAccessor = Depends(get_transaction_accessor),
):
    """Per-day totals of `total_amount` for one calendar month (expense/revenue graph)."""
    try:
        start = parse_month(month) if month else date.today().replace(day=1)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="month must be YYYY-MM")

    try:
        if owner_id is not None:
            rows = transactions.search(TransactionSearch(owner_id=owner_id))
        else:
            rows = transactions.list()
    except ApiError as e:
        raise http_error(e)
    return daily_totals(rows, start, transaction_type=transaction_type, owner_id=owner_id)


@router.get("/inventory", response_model=List[InventoryPoint])
def get_inventory_chart(
    category_id: Optional[int] = Query(None),
    weight_id: Optional[int] = Query(None),
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    categories: CategoryAccessor = Depends(get_category_accessor),
    weights: WeightAccessor = Depends(get_weight_accessor),
):
    """Quantity per inventory item, optionally filtered by category/weight."""
    try:
        items = inventory.list()
        category_names = {c.id: c.name for c in categories.list()}
        weight_names = {w.id: w.name for w in weights.list()}
    except ApiError as e:
        raise http_error(e)
    return inventory_chart(
        items,
        category_id=category_id,
        weight_id=weight_id,
        category_names=category_names,
        weight_names=weight_names,
    )
