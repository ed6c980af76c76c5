from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ..core.config import settings
from ..core.errors import ApiError
from ..schemas.inventory import InventoryCreate, InventoryItem, InventoryStatus, InventoryUpdate
from ..services.deps import get_inventory_accessor, get_status_monitor
from ..services.inventory import InventoryAccessor
from ..services.status import InventoryStatusMonitor, classify
from .errors import http_error

router = APIRouter()


def _refresh(monitor: Optional[InventoryStatusMonitor]) -> None:
    if monitor is not None:
        monitor.refresh()


@router.get("/", response_model=List[InventoryItem])
def list_inventory(
    skip: Optional[int] = Query(None, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
):
    try:
        return inventory.list(skip=skip, limit=limit)
    except ApiError as e:
        raise http_error(e)


@router.get("/status", response_model=InventoryStatus)
def inventory_status(
    refresh: bool = Query(False, description="Re-evaluate now instead of returning the last snapshot"),
    threshold: Optional[float] = Query(None, ge=0),
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    monitor: Optional[InventoryStatusMonitor] = Depends(get_status_monitor),
):
    """Out-of-stock / low-stock counts for the alert badge."""
    if threshold is not None or monitor is None:
        try:
            items = inventory.list()
        except ApiError as e:
            raise http_error(e)
        return classify(items, threshold if threshold is not None else settings.low_stock_threshold)
    if refresh:
        return monitor.refresh()
    return monitor.snapshot


@router.get("/{inventory_id}", response_model=InventoryItem)
def get_inventory_item(inventory_id: int, inventory: InventoryAccessor = Depends(get_inventory_accessor)):
    try:
        return inventory.fetch_by_id(inventory_id)
    except ApiError as e:
        raise http_error(e)


@router.post("/", response_model=InventoryItem, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    payload: InventoryCreate,
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    monitor: Optional[InventoryStatusMonitor] = Depends(get_status_monitor),
):
    try:
        item = inventory.create(payload)
    except ApiError as e:
        raise http_error(e)
    _refresh(monitor)
    return item


@router.put("/{inventory_id}", response_model=InventoryItem)
def update_inventory_item(
    inventory_id: int,
    payload: InventoryUpdate,
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    monitor: Optional[InventoryStatusMonitor] = Depends(get_status_monitor),
):
    """Direct edit (full record). Stock moved by transactions goes through /transactions instead."""
    try:
        item = inventory.update(inventory_id, payload)
    except ApiError as e:
        raise http_error(e)
    _refresh(monitor)
    return item


@router.delete("/{inventory_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    inventory_id: int,
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    monitor: Optional[InventoryStatusMonitor] = Depends(get_status_monitor),
):
    try:
        inventory.delete(inventory_id)
    except ApiError as e:
        raise http_error(e)
    _refresh(monitor)
