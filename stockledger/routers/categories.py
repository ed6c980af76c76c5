from typing import List

from fastapi import APIRouter, Depends, status

from ..core.errors import ApiError
from ..schemas.categories import Category, CategoryCreate, CategoryUpdate
from ..services.categories import CategoryAccessor
from ..services.deps import get_category_accessor
from .errors import http_error

router = APIRouter()


@router.get("/", response_model=List[Category])
def list_categories(categories: CategoryAccessor = Depends(get_category_accessor)):
    try:
        return categories.list()
    except ApiError as e:
        raise http_error(e)


@router.post("/", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(payload: CategoryCreate, categories: CategoryAccessor = Depends(get_category_accessor)):
    try:
        return categories.create(payload)
    except ApiError as e:
        raise http_error(e)


@router.put("/{category_id}", response_model=Category)
def update_category(
    category_id: int,
    payload: CategoryUpdate,
    categories: CategoryAccessor = Depends(get_category_accessor),
):
    try:
        return categories.update(category_id, payload)
    except ApiError as e:
        raise http_error(e)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(category_id: int, categories: CategoryAccessor = Depends(get_category_accessor)):
    try:
        categories.delete(category_id)
    except ApiError as e:
        raise http_error(e)
