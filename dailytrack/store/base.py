from dataclasses import dataclass
from typing import Any, Optional

from ..errors import TrackerError

REFERENCE_COLLECTIONS = ("expense_categories", "protein_foods")


@dataclass
class StoreResult:
    """Outcome of a single store call: either `data` or `error` is set."""

    data: Any = None
    error: Optional[TrackerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordStore:
    """Record collections scoped by owner id and calendar date.

    Implementations report backend failures through `StoreResult.error` and
    never raise them past the caller. Rows come back as plain dicts.
    """

    def list(self, collection, owner=None, on=None, between=None, order_by=None,
             descending=False, limit=None, **match) -> StoreResult:
        raise NotImplementedError

    def get(self, collection, record_id, owner=None) -> StoreResult:
        raise NotImplementedError

    def insert(self, collection, values) -> StoreResult:
        raise NotImplementedError

    def update(self, collection, record_id, patch, owner=None) -> StoreResult:
        raise NotImplementedError

    def delete(self, collection, record_id, owner=None) -> StoreResult:
        raise NotImplementedError

    def delete_where(self, collection, owner=None, on=None, **match) -> StoreResult:
        raise NotImplementedError

    def has_role(self, user_id, role) -> bool:
        result = self.list("user_roles", owner=user_id, role=role, limit=1)
        return bool(result.ok and result.data)
