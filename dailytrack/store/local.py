import json
import threading
import uuid
from datetime import date, datetime
from pathlib import Path

from flask import current_app

from .. import reference
from ..errors import ReadError, WriteError
from .base import REFERENCE_COLLECTIONS, RecordStore, StoreResult

# Fixed keys the tracking collections are stored under
STORAGE_KEYS = {
    "expenses": "daily_expenses",
    "protein_entries": "protein_entries",
    "water_entries": "water_entries",
    "notes": "daily_notes",
}

TIMESTAMPED = {"water_entries", "notes"}


def _jsonable(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


def _reference_rows(collection):
    if collection == "expense_categories":
        rows = reference.default_categories()
    else:
        rows = reference.default_protein_foods()
    return [dict(row, id=position) for position, row in enumerate(rows, start=1)]


class LocalStore(RecordStore):
    """Record store keeping tracking records as JSON arrays in one file.

    Category and food lists are the static defaults; there are no roles, so
    nobody is an admin in this mode.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self):
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as fh:
            return json.load(fh)

    def _save(self, data):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, ensure_ascii=False, indent=2)
        tmp.replace(self.path)

    @staticmethod
    def _matches(row, owner=None, on=None, between=None, **match):
        if owner is not None and row.get("user_id") != owner:
            return False
        if on is not None and row.get("date") != _jsonable(on):
            return False
        if between is not None:
            start, end = (_jsonable(d) for d in between)
            if not (start <= row.get("date", "") <= end):
                return False
        return all(row.get(key) == _jsonable(value) for key, value in match.items())

    def list(self, collection, owner=None, on=None, between=None, order_by=None,
             descending=False, limit=None, **match):
        if collection in REFERENCE_COLLECTIONS:
            rows = _reference_rows(collection)
        elif collection in STORAGE_KEYS:
            try:
                with self._lock:
                    rows = self._load().get(STORAGE_KEYS[collection], [])
            except (OSError, ValueError) as exc:
                current_app.logger.warning("Reading %s from %s failed: %s", collection, self.path, exc)
                return StoreResult(error=ReadError(f"Failed to load {collection.replace('_', ' ')}"))
        else:
            return StoreResult(data=[])
        rows = [r for r in rows if self._matches(r, owner=owner, on=on, between=between, **match)]
        if order_by:
            rows.sort(key=lambda r: r.get(order_by) or "", reverse=descending)
        if limit:
            rows = rows[:limit]
        return StoreResult(data=rows)

    def get(self, collection, record_id, owner=None):
        result = self.list(collection, owner=owner)
        if not result.ok:
            return result
        for row in result.data:
            if str(row.get("id")) == str(record_id):
                return StoreResult(data=row)
        return StoreResult(error=ReadError("Record not found", not_found=True))

    def _mutate(self, collection, change):
        if collection not in STORAGE_KEYS:
            return StoreResult(error=WriteError(f"{collection} cannot be changed in local mode"))
        key = STORAGE_KEYS[collection]
        try:
            with self._lock:
                data = self._load()
                rows = data.get(key, [])
                rows, result = change(rows)
                if result.ok:
                    data[key] = rows
                    self._save(data)
        except (OSError, ValueError) as exc:
            current_app.logger.warning("Writing %s to %s failed: %s", collection, self.path, exc)
            return StoreResult(error=WriteError("Failed to save record"))
        return result

    def insert(self, collection, values):
        row = {k: _jsonable(v) for k, v in values.items()}
        row["id"] = uuid.uuid4().hex
        if collection in TIMESTAMPED:
            row.setdefault("created_at", datetime.utcnow().isoformat())

        def change(rows):
            return rows + [row], StoreResult(data=row)

        return self._mutate(collection, change)

    def update(self, collection, record_id, patch, owner=None):
        def change(rows):
            for row in rows:
                if row.get("id") == str(record_id) and self._matches(row, owner=owner):
                    row.update({k: _jsonable(v) for k, v in patch.items()})
                    return rows, StoreResult(data=row)
            return rows, StoreResult(error=WriteError("Record not found", not_found=True))

        return self._mutate(collection, change)

    def delete(self, collection, record_id, owner=None):
        def change(rows):
            kept = [r for r in rows if not (r.get("id") == str(record_id) and self._matches(r, owner=owner))]
            if len(kept) == len(rows):
                return rows, StoreResult(error=WriteError("Record not found", not_found=True))
            return kept, StoreResult(data=True)

        return self._mutate(collection, change)

    def delete_where(self, collection, owner=None, on=None, **match):
        def change(rows):
            kept = [r for r in rows if not self._matches(r, owner=owner, on=on, **match)]
            return kept, StoreResult(data=len(rows) - len(kept))

        return self._mutate(collection, change)
