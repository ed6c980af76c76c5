from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.errors import ApiError
from ..schemas.common import EntityId
from ..schemas.transactions import (
    Transaction,
    TransactionCreate,
    TransactionSearch,
    TransactionType,
    TransactionUpdate,
    TransactionWriteResult,
)
from ..services.deps import get_sync_engine, get_transaction_accessor
from ..services.sync import InventorySyncEngine
from ..services.transactions import TransactionAccessor
from .errors import http_error

router = APIRouter()


@router.get("/", response_model=List[Transaction])
def list_transactions(
    skip: Optional[int] = Query(None, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    transactions: TransactionAccessor = Depends(get_transaction_accessor),
):
    try:
        return transactions.list(skip=skip, limit=limit)
    except ApiError as e:
        raise http_error(e)


@router.get("/search", response_model=List[Transaction])
def search_transactions(
    owner_id: Optional[EntityId] = Query(None),
    q: Optional[str] = Query(None, description="Free-text search"),
    transaction_type: Optional[TransactionType] = Query(None),
    date_from: Optional[str] = Query(None),
    date_to: Optional[str] = Query(None),
    inventory_id: Optional[int] = Query(None, description="Filter by linked inventory item"),
    skip: Optional[int] = Query(None, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    transactions: TransactionAccessor = Depends(get_transaction_accessor),
):
    filters = TransactionSearch(
        owner_id=owner_id,
        q=q,
        transaction_type=transaction_type,
        date_from=date_from,
        date_to=date_to,
        inventory_id=inventory_id,
        skip=skip,
        limit=limit,
    )
    try:
        return transactions.search(filters)
    except ApiError as e:
        raise http_error(e)


@router.get("/{transaction_id}", response_model=Transaction)
def get_transaction(transaction_id: int, transactions: TransactionAccessor = Depends(get_transaction_accessor)):
    try:
        return transactions.fetch_by_id(transaction_id)
    except ApiError as e:
        raise http_error(e)


@router.post("/", response_model=TransactionWriteResult, status_code=status.HTTP_201_CREATED)
def create_transaction(payload: TransactionCreate, engine: InventorySyncEngine = Depends(get_sync_engine)):
    """
    Create a transaction and adjust the linked inventory item.

    A sale larger than the available stock is rejected before anything is written.
    If the stock adjustment fails after the transaction was created, the
    transaction is kept and the failure comes back in `warnings`.
    """
    result = engine.create(payload)
    if not result.success:
        raise http_error(result.error)
    return TransactionWriteResult(transaction=result.data, warnings=result.warnings)


@router.put("/{transaction_id}", response_model=TransactionWriteResult)
def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    engine: InventorySyncEngine = Depends(get_sync_engine),
):
    """Re-book the stock effect (old reversed, new applied), then update the record."""
    result = engine.update(transaction_id, payload)
    if not result.success:
        raise http_error(result.error)
    return TransactionWriteResult(transaction=result.data, warnings=result.warnings)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(transaction_id: int, engine: InventorySyncEngine = Depends(get_sync_engine)):
    """Reverse the stock effect, then delete. Nothing is deleted if the reversal fails."""
    result = engine.delete(transaction_id)
    if not result.success:
        raise http_error(result.error)
