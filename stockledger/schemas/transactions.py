# Transactions as exchanged with the remote store.
# NOTE: the store computes total_amount; decimals may arrive as strings or numbers.

from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .common import EntityId, Money, Quantity

TransactionType = Literal["expense", "earning", "capital"]


def _blank_to_none(v):
    if v is None or v == "" or v == 0:
        return None
    return v


class Transaction(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: str
    description: Optional[str] = None
    owner_id: EntityId
    transaction_type: TransactionType
    amount_per_unit: Money = Decimal("0.00")
    quantity: Quantity = Decimal("1")
    total_amount: Money = Decimal("0.00")
    date: str
    inventory_id: Optional[int] = None
    purchase_price: Optional[Money] = None
    # Client enrichment
    owner_full_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("owner_full_name", "ownerFullName"))
    inventory_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("inventory_name", "inventoryName"))

    @field_validator("purchase_price", mode="before")
    @classmethod
    def _purchase_price(cls, v):
        return _blank_to_none(v)

    @field_validator("date", mode="before")
    @classmethod
    def _date_str(cls, v):
        return str(v) if v is not None else v


class TransactionCreate(BaseModel):
    title: str
    owner_id: EntityId
    description: Optional[str] = None
    transaction_type: TransactionType = "expense"
    amount_per_unit: Money = Decimal("0.00")
    quantity: Quantity = Decimal("1")
    date: str
    inventory_id: Optional[int] = None
    purchase_price: Optional[Money] = None

    @field_validator("title")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v

    @field_validator("purchase_price", mode="before")
    @classmethod
    def _purchase_price(cls, v):
        return _blank_to_none(v)


class TransactionUpdate(BaseModel):
    """Every field optional; only fields present in the payload are sent upstream."""

    title: Optional[str] = None
    description: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    amount_per_unit: Optional[Money] = None
    quantity: Optional[Quantity] = None
    date: Optional[str] = None
    inventory_id: Optional[int] = None
    purchase_price: Optional[Money] = None

    def provided(self, field: str) -> bool:
        return field in self.model_fields_set


class TransactionSearch(BaseModel):
    owner_id: Optional[EntityId] = None
    q: Optional[str] = None
    transaction_type: Optional[TransactionType] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    inventory_id: Optional[int] = None
    skip: Optional[int] = None
    limit: Optional[int] = None

    def to_params(self) -> dict:
        params = {}
        for key, value in self.model_dump(exclude_none=True).items():
            # empty free-text / dates are the same as "no filter"
            if value == "":
                continue
            params[key] = value
        return params


class TransactionWriteResult(BaseModel):
    transaction: Transaction
    warnings: List[str] = []
