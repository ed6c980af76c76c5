from typing import List, Optional

from ..schemas.categories import Category, CategoryCreate, CategoryUpdate
from .base import RemoteResource, as_list, page_params


class CategoryAccessor(RemoteResource):
    path = "/categories"

    def list(self, skip: Optional[int] = None, limit: Optional[int] = None) -> List[Category]:
        raw = self.client.get(self.path, params=page_params(skip, limit))
        return [Category.model_validate(r) for r in as_list(raw)]

    def create(self, payload: CategoryCreate) -> Category:
        return Category.model_validate(self.client.post(self.path, json=payload.model_dump(mode="json")))

    def update(self, category_id: int, payload: CategoryUpdate) -> Category:
        raw = self.client.put(self.item_path(category_id), json=payload.model_dump(mode="json", exclude_unset=True))
        return Category.model_validate(raw)

    def delete(self, category_id: int) -> None:
        self.client.delete(self.item_path(category_id))
