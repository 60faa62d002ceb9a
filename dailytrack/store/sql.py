from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import ReadError, WriteError
from ..extensions import db
from ..models import (
    Expense,
    ExpenseCategory,
    Note,
    ProteinEntry,
    ProteinFood,
    User,
    UserRole,
    WaterEntry,
)
from .base import RecordStore, StoreResult

# collection -> (model, owner column, exposed columns or None for all, writable)
COLLECTIONS = {
    "expenses": (Expense, "user_id", None, True),
    "protein_entries": (ProteinEntry, "user_id", None, True),
    "water_entries": (WaterEntry, "user_id", None, True),
    "notes": (Note, "user_id", None, True),
    "expense_categories": (ExpenseCategory, None, None, True),
    "protein_foods": (ProteinFood, None, None, True),
    "user_roles": (UserRole, "user_id", None, True),
    "profiles": (User, "id", ("id", "email", "name"), False),
}


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    if getattr(orig, "pgcode", None) == "23505":
        return True
    text = str(orig).lower()
    return "unique" in text or "duplicate" in text


def row_to_dict(row, columns=None):
    names = columns or [c.key for c in row.__table__.columns]
    return {name: getattr(row, name) for name in names}


class SQLStore(RecordStore):
    """Record store backed by the Flask-SQLAlchemy session."""

    def _collection(self, collection):
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise LookupError(f"Unknown collection: {collection}")

    def _filtered(self, collection, owner=None, on=None, between=None, **match):
        model, owner_col, _, _ = self._collection(collection)
        query = model.query
        if owner is not None and owner_col:
            query = query.filter(getattr(model, owner_col) == owner)
        if on is not None:
            query = query.filter(model.date == on)
        if between is not None:
            start, end = between
            query = query.filter(model.date >= start, model.date <= end)
        for column, value in match.items():
            query = query.filter(getattr(model, column) == value)
        return query

    def list(self, collection, owner=None, on=None, between=None, order_by=None,
             descending=False, limit=None, **match):
        model, _, columns, _ = self._collection(collection)
        query = self._filtered(collection, owner=owner, on=on, between=between, **match)
        if order_by:
            column = getattr(model, order_by)
            query = query.order_by(column.desc() if descending else column.asc(), model.id)
        else:
            query = query.order_by(model.id)
        if limit:
            query = query.limit(limit)
        try:
            rows = query.all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Reading %s failed: %s", collection, exc)
            return StoreResult(error=ReadError(f"Failed to load {collection.replace('_', ' ')}"))
        return StoreResult(data=[row_to_dict(r, columns) for r in rows])

    def insert(self, collection, values):
        model, _, columns, writable = self._collection(collection)
        if not writable:
            return StoreResult(error=WriteError(f"{collection} is read-only"))
        row = model(**values)
        db.session.add(row)
        try:
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            conflict = _is_unique_violation(exc)
            current_app.logger.info("Insert into %s rejected: %s", collection, exc.orig)
            return StoreResult(error=WriteError("Record already exists" if conflict else "Record was rejected",
                                                conflict=conflict))
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Insert into %s failed: %s", collection, exc)
            return StoreResult(error=WriteError("Failed to save record"))
        return StoreResult(data=row_to_dict(row, columns))

    def _get_owned(self, collection, record_id, owner):
        try:
            record_id = int(record_id)
        except (TypeError, ValueError):
            return None
        return self._filtered(collection, owner=owner, id=record_id).first()

    def get(self, collection, record_id, owner=None):
        _, _, columns, _ = self._collection(collection)
        try:
            row = self._get_owned(collection, record_id, owner)
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Reading %s/%s failed: %s", collection, record_id, exc)
            return StoreResult(error=ReadError("Failed to load record"))
        if row is None:
            return StoreResult(error=ReadError("Record not found", not_found=True))
        return StoreResult(data=row_to_dict(row, columns))

    def update(self, collection, record_id, patch, owner=None):
        model, _, columns, writable = self._collection(collection)
        if not writable:
            return StoreResult(error=WriteError(f"{collection} is read-only"))
        try:
            row = self._get_owned(collection, record_id, owner)
            if row is None:
                return StoreResult(error=WriteError("Record not found", not_found=True))
            for key, value in patch.items():
                setattr(row, key, value)
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            conflict = _is_unique_violation(exc)
            return StoreResult(error=WriteError("Record already exists" if conflict else "Record was rejected",
                                                conflict=conflict))
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Update of %s/%s failed: %s", collection, record_id, exc)
            return StoreResult(error=WriteError("Failed to update record"))
        return StoreResult(data=row_to_dict(row, columns))

    def delete(self, collection, record_id, owner=None):
        _, _, _, writable = self._collection(collection)
        if not writable:
            return StoreResult(error=WriteError(f"{collection} is read-only"))
        try:
            row = self._get_owned(collection, record_id, owner)
            if row is None:
                return StoreResult(error=WriteError("Record not found", not_found=True))
            db.session.delete(row)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Delete of %s/%s failed: %s", collection, record_id, exc)
            return StoreResult(error=WriteError("Failed to delete record"))
        return StoreResult(data=True)

    def delete_where(self, collection, owner=None, on=None, **match):
        _, _, _, writable = self._collection(collection)
        if not writable:
            return StoreResult(error=WriteError(f"{collection} is read-only"))
        try:
            count = self._filtered(collection, owner=owner, on=on, **match).delete(synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            current_app.logger.warning("Bulk delete from %s failed: %s", collection, exc)
            return StoreResult(error=WriteError("Failed to delete records"))
        return StoreResult(data=count)
