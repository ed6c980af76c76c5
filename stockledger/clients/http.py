"""
Client for the remote inventory/transaction REST store.

- JSON requests/responses, decimal fields passed through untouched
- 404 -> NotFoundError, other >= 400 -> ApiError (status + decoded payload)
- Transient failures (5xx, 429, connection errors) retried for GET only
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from ..core.config import settings
from ..core.errors import ApiError, NotFoundError, TransportError

logger = logging.getLogger(__name__)

RETRYABLE_STATUSES = {429, 500, 502, 503, 504}


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before retry number `attempt` (1-based)."""
    return min(2.0, 0.1 * (2 ** attempt))


def _decode(resp: requests.Response) -> Any:
    text = resp.text
    if not text:
        return None
    try:
        return resp.json()
    except ValueError:
        return text


@dataclass
class RemoteApiClient:
    base_url: str
    timeout: float = 10.0
    retries: int = 2

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", "Content-Type": "application/json"}

    def _url(self, path: str) -> str:
        if path.startswith("http"):
            return path
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        method = method.upper()
        url = self._url(path)
        attempts = self.retries + 1 if method == "GET" else 1

        for attempt in range(1, attempts + 1):
            last = attempt == attempts
            try:
                resp = requests.request(
                    method,
                    url,
                    json=json,
                    params=params,
                    headers=self._headers(),
                    timeout=self.timeout,
                )
            except requests.Timeout as e:
                raise TransportError("Request timed out") from e
            except requests.ConnectionError as e:
                if last:
                    raise TransportError(f"{method} {path} failed: {e}") from e
                logger.warning("%s %s connection error, retrying (%d/%d)", method, path, attempt, self.retries)
                time.sleep(backoff_delay(attempt))
                continue

            if resp.status_code in RETRYABLE_STATUSES and not last:
                logger.warning("%s %s returned %s, retrying (%d/%d)", method, path, resp.status_code, attempt, self.retries)
                time.sleep(backoff_delay(attempt))
                continue

            payload = _decode(resp)
            if resp.status_code == 404:
                raise NotFoundError(f"{method} {path} not found", payload=payload)
            if resp.status_code >= 400:
                raise ApiError(
                    f"HTTP {resp.status_code} {resp.reason or ''}".strip(),
                    status=resp.status_code,
                    payload=payload,
                )
            if resp.status_code == 204:
                return None
            return payload

        # unreachable: the last attempt either returns or raises
        raise TransportError(f"{method} {path} failed")

    def get(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, *, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, *, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)


def make_client_from_settings() -> RemoteApiClient:
    return RemoteApiClient(
        base_url=settings.api_url,
        timeout=settings.api_timeout,
        retries=settings.api_retries,
    )


_client: Optional[RemoteApiClient] = None


def get_api_client() -> RemoteApiClient:
    """FastAPI dependency: one shared client per process."""
    global _client
    if _client is None:
        _client = make_client_from_settings()
    return _client
