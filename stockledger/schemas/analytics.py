from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel

from .common import Money, Quantity


class DailyPoint(BaseModel):
    day: str  # YYYY-MM-DD
    total: Money


class MonthlyTotals(BaseModel):
    month: str  # YYYY-MM
    transaction_type: Optional[str] = None
    owner_id: Optional[str] = None
    month_total: Money = Decimal("0")
    points: List[DailyPoint] = []


class InventoryPoint(BaseModel):
    id: int
    name: str
    quantity: Quantity
    category_name: Optional[str] = None
    weight_name: Optional[str] = None
