from typing import Any, Dict, List, Optional

from ..clients.http import RemoteApiClient


def page_params(skip: Optional[int] = None, limit: Optional[int] = None) -> Dict[str, int]:
    params: Dict[str, int] = {}
    if skip is not None:
        params["skip"] = skip
    if limit is not None:
        params["limit"] = limit
    return params


def as_list(raw: Any) -> List[Any]:
    # the store answers lists; anything else is treated as empty
    return raw if isinstance(raw, list) else []


class RemoteResource:
    """Thin accessor over one remote collection."""

    path: str = "/"

    def __init__(self, client: RemoteApiClient):
        self.client = client

    def item_path(self, entity_id) -> str:
        return f"{self.path}/{entity_id}"
