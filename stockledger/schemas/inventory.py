from decimal import Decimal
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .common import Quantity


class InventoryItem(BaseModel):
    """Inventory record as read from the remote store (quantity is authoritative stock)."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    quantity: Quantity = Decimal("0")
    category_id: Optional[int] = None
    weight_id: Optional[int] = None
    # The store may or may not return enriched names, in either key style
    category_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("category_name", "categoryName"))
    weight_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("weight_name", "weightName"))


class InventoryCreate(BaseModel):
    name: str
    quantity: Quantity = Decimal("0")
    category_id: int
    weight_id: int

    @field_validator("name")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v

    @field_validator("quantity")
    @classmethod
    def _non_negative(cls, v):
        if v < 0:
            raise ValueError("quantity must be >= 0")
        return v


class InventoryUpdate(BaseModel):
    """Full-record update: the store does not promise partial patch semantics."""

    name: str
    quantity: Quantity
    category_id: Optional[int] = None
    weight_id: Optional[int] = None

    @field_validator("quantity")
    @classmethod
    def _non_negative(cls, v):
        if v < 0:
            raise ValueError("quantity must be >= 0")
        return v


class InventoryStatus(BaseModel):
    out_of_stock_count: int = 0
    low_stock_count: int = 0
    out_of_stock_items: List[InventoryItem] = []
    threshold: Quantity = Decimal("3")
    loading: bool = True
