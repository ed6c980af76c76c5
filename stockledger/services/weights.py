from typing import List, Optional

from ..schemas.weights import Weight, WeightCreate, WeightUpdate
from .base import RemoteResource, as_list, page_params


class WeightAccessor(RemoteResource):
    path = "/weights"

    def list(self, skip: Optional[int] = None, limit: Optional[int] = None) -> List[Weight]:
        raw = self.client.get(self.path, params=page_params(skip, limit))
        return [Weight.model_validate(r) for r in as_list(raw)]

    def create(self, payload: WeightCreate) -> Weight:
        return Weight.model_validate(self.client.post(self.path, json=payload.model_dump(mode="json")))

    def update(self, weight_id: int, payload: WeightUpdate) -> Weight:
        raw = self.client.put(self.item_path(weight_id), json=payload.model_dump(mode="json", exclude_unset=True))
        return Weight.model_validate(raw)

    def delete(self, weight_id: int) -> None:
        self.client.delete(self.item_path(weight_id))
