from typing import List, Optional

from ..core.errors import ApiError, NotFoundError, TransactionPersistenceFailedError
from ..schemas.transactions import Transaction, TransactionCreate, TransactionSearch, TransactionUpdate
from .base import RemoteResource, as_list, page_params


def _persistence_failed(action: str, e: ApiError) -> TransactionPersistenceFailedError:
    return TransactionPersistenceFailedError(
        f"Failed to {action} transaction: {e.message}",
        # transport failures (status 0) fall back to 502
        status=e.status or None,
        payload=e.payload,
    )


class TransactionAccessor(RemoteResource):
    """
    Remote `transactions` collection.

    create/update/delete only write the transaction record; inventory
    adjustments are done by the sync engine around these calls.
    """

    path = "/transactions"

    def list(self, skip: Optional[int] = None, limit: Optional[int] = None) -> List[Transaction]:
        raw = self.client.get(self.path, params=page_params(skip, limit))
        return [Transaction.model_validate(r) for r in as_list(raw)]

    def search(self, filters: TransactionSearch) -> List[Transaction]:
        raw = self.client.get(f"{self.path}/search", params=filters.to_params())
        return [Transaction.model_validate(r) for r in as_list(raw)]

    def fetch_by_id(self, transaction_id: int) -> Transaction:
        raw = self.client.get(self.item_path(transaction_id))
        return Transaction.model_validate(raw)

    def create(self, payload: TransactionCreate) -> Transaction:
        try:
            raw = self.client.post(self.path, json=payload.model_dump(mode="json"))
        except NotFoundError:
            raise
        except ApiError as e:
            raise _persistence_failed("create", e) from e
        return Transaction.model_validate(raw)

    def update(self, transaction_id: int, payload: TransactionUpdate) -> Transaction:
        try:
            raw = self.client.put(
                self.item_path(transaction_id),
                json=payload.model_dump(mode="json", exclude_unset=True),
            )
        except NotFoundError:
            raise
        except ApiError as e:
            raise _persistence_failed("update", e) from e
        return Transaction.model_validate(raw)

    def delete(self, transaction_id: int) -> None:
        try:
            self.client.delete(self.item_path(transaction_id))
        except NotFoundError:
            raise
        except ApiError as e:
            raise _persistence_failed("delete", e) from e
