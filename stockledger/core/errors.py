from decimal import Decimal
from typing import Any, Optional


class ApiError(RuntimeError):
    """Base error for anything the remote store or the sync engine reports."""

    status: int = 500

    def __init__(self, message: str, *, status: Optional[int] = None, payload: Any = None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status
        self.payload = payload


class TransportError(ApiError):
    """Timeout or connection failure; the request never got an HTTP answer."""

    status = 0


class NotFoundError(ApiError):
    status = 404


class InsufficientInventoryError(ApiError):
    status = 400

    def __init__(self, available: Decimal, requested: Decimal):
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory. Available: {available}, Requested: {requested}",
            payload={"available": str(available), "requested": str(requested)},
        )


class InventoryUpdateFailedError(ApiError):
    status = 400


class TransactionPersistenceFailedError(ApiError):
    status = 502
