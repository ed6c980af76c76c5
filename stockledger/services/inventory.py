from decimal import Decimal
from typing import List, Optional

from ..schemas.inventory import InventoryCreate, InventoryItem, InventoryUpdate
from .base import RemoteResource, as_list, page_params


class InventoryAccessor(RemoteResource):
    """
    Remote `inventory` collection.

    Never touches transactions; stock changes caused by transactions are the
    sync engine's job.
    """

    path = "/inventory"

    def list(self, skip: Optional[int] = None, limit: Optional[int] = None) -> List[InventoryItem]:
        raw = self.client.get(self.path, params=page_params(skip, limit))
        return [InventoryItem.model_validate(r) for r in as_list(raw)]

    def fetch_by_id(self, inventory_id: int) -> InventoryItem:
        """Raises NotFoundError when the item does not exist."""
        raw = self.client.get(self.item_path(inventory_id))
        return InventoryItem.model_validate(raw)

    def create(self, payload: InventoryCreate) -> InventoryItem:
        raw = self.client.post(self.path, json=payload.model_dump(mode="json"))
        return InventoryItem.model_validate(raw)

    def update(self, inventory_id: int, payload: InventoryUpdate) -> InventoryItem:
        raw = self.client.put(self.item_path(inventory_id), json=payload.model_dump(mode="json"))
        return InventoryItem.model_validate(raw)

    def apply_quantity(self, item: InventoryItem, new_quantity: Decimal) -> InventoryItem:
        """Write a new stock level, resending every other field of `item` unchanged."""
        payload = InventoryUpdate(
            name=item.name,
            quantity=new_quantity,
            category_id=item.category_id,
            weight_id=item.weight_id,
        )
        return self.update(item.id, payload)

    def delete(self, inventory_id: int) -> None:
        self.client.delete(self.item_path(inventory_id))
