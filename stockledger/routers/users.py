from typing import List

from fastapi import APIRouter, Depends, Query, status

from ..core.errors import ApiError
from ..schemas.common import EntityId
from ..schemas.users import User, UserCreate, UserUpdate
from ..services.deps import get_user_accessor
from ..services.users import UserAccessor
from .errors import http_error

router = APIRouter()


@router.get("/", response_model=List[User])
def list_users(
    force_refresh: bool = Query(False, description="Bypass the cached user list"),
    users: UserAccessor = Depends(get_user_accessor),
):
    try:
        return users.list(force_refresh=force_refresh)
    except ApiError as e:
        raise http_error(e)


@router.get("/{user_id}", response_model=User)
def get_user(user_id: EntityId, users: UserAccessor = Depends(get_user_accessor)):
    try:
        return users.get(user_id)
    except ApiError as e:
        raise http_error(e)


@router.post("/", response_model=User, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, users: UserAccessor = Depends(get_user_accessor)):
    try:
        return users.create(payload)
    except ApiError as e:
        raise http_error(e)


@router.put("/{user_id}", response_model=User)
def update_user(user_id: EntityId, payload: UserUpdate, users: UserAccessor = Depends(get_user_accessor)):
    try:
        return users.update(user_id, payload)
    except ApiError as e:
        raise http_error(e)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: EntityId, users: UserAccessor = Depends(get_user_accessor)):
    try:
        users.delete(user_id)
    except ApiError as e:
        raise http_error(e)
