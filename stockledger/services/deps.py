# FastAPI dependencies wiring the accessors and the sync engine to one client.
# The app owns the long-lived pieces (user cache, status monitor) on app.state.

from typing import Optional

from fastapi import Depends, Request

from ..clients.http import RemoteApiClient, get_api_client
from ..core.config import settings
from .categories import CategoryAccessor
from .inventory import InventoryAccessor
from .status import InventoryStatusMonitor
from .sync import InventorySyncEngine
from .transactions import TransactionAccessor
from .users import UserAccessor, UserCache
from .weights import WeightAccessor


def get_inventory_accessor(client: RemoteApiClient = Depends(get_api_client)) -> InventoryAccessor:
    return InventoryAccessor(client)


def get_transaction_accessor(client: RemoteApiClient = Depends(get_api_client)) -> TransactionAccessor:
    return TransactionAccessor(client)


def get_category_accessor(client: RemoteApiClient = Depends(get_api_client)) -> CategoryAccessor:
    return CategoryAccessor(client)


def get_weight_accessor(client: RemoteApiClient = Depends(get_api_client)) -> WeightAccessor:
    return WeightAccessor(client)


def get_user_accessor(request: Request, client: RemoteApiClient = Depends(get_api_client)) -> UserAccessor:
    cache = getattr(request.app.state, "user_cache", None)
    if cache is None:
        cache = request.app.state.user_cache = UserCache(settings.users_cache_ttl)
    return UserAccessor(client, cache)


def get_status_monitor(request: Request) -> Optional[InventoryStatusMonitor]:
    return getattr(request.app.state, "status_monitor", None)


def get_sync_engine(
    inventory: InventoryAccessor = Depends(get_inventory_accessor),
    transactions: TransactionAccessor = Depends(get_transaction_accessor),
    monitor: Optional[InventoryStatusMonitor] = Depends(get_status_monitor),
) -> InventorySyncEngine:
    return InventorySyncEngine(
        inventory,
        transactions,
        on_inventory_change=monitor.refresh if monitor is not None else None,
    )
