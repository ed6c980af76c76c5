from __future__ import annotations

import time
from typing import Callable, List, Optional

from ..clients.http import RemoteApiClient
from ..core.config import settings
from ..schemas.common import EntityId
from ..schemas.users import User, UserCreate, UserUpdate
from .base import RemoteResource, as_list


class UserCache:
    """
    In-memory user list with a TTL.

    Owned by whoever owns the UserAccessor; every user write invalidates it.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._users: Optional[List[User]] = None
        self._expires = 0.0

    def get(self) -> Optional[List[User]]:
        if self._users is not None and self._expires > self._clock():
            return self._users
        return None

    def put(self, users: List[User]) -> None:
        self._users = users
        self._expires = self._clock() + self.ttl

    def invalidate(self) -> None:
        self._users = None
        self._expires = 0.0


class UserAccessor(RemoteResource):
    path = "/users"

    def __init__(self, client: RemoteApiClient, cache: Optional[UserCache] = None):
        super().__init__(client)
        self.cache = cache if cache is not None else UserCache(settings.users_cache_ttl)

    def list(self, force_refresh: bool = False) -> List[User]:
        if not force_refresh:
            cached = self.cache.get()
            if cached is not None:
                return cached
        users = [User.model_validate(r) for r in as_list(self.client.get(self.path))]
        self.cache.put(users)
        return users

    def get(self, user_id: EntityId) -> User:
        return User.model_validate(self.client.get(self.item_path(user_id)))

    def create(self, payload: UserCreate) -> User:
        raw = self.client.post(self.path, json=payload.model_dump(mode="json"))
        self.cache.invalidate()
        return User.model_validate(raw)

    def update(self, user_id: EntityId, payload: UserUpdate) -> User:
        raw = self.client.put(self.item_path(user_id), json=payload.model_dump(mode="json", exclude_unset=True))
        self.cache.invalidate()
        return User.model_validate(raw)

    def delete(self, user_id: EntityId) -> None:
        self.client.delete(self.item_path(user_id))
        self.cache.invalidate()
