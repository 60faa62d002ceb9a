"""Typed records decoded once from raw store rows.

Both stores hand back dicts; the SQL store carries `date` objects while the
local store carries ISO strings. Everything past this module sees dates.
"""
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def _as_datetime(value) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.fromisoformat(value)


@dataclass
class ExpenseRecord:
    id: object
    owner: object
    item_name: str
    category: str
    amount: float
    date: date


@dataclass
class ProteinRecord:
    id: object
    owner: object
    food_id: object
    food_name: str
    quantity: float
    protein_amount: float
    date: date


@dataclass
class WaterRecord:
    id: object
    owner: object
    amount_ml: float
    date: date
    created_at: Optional[datetime]


@dataclass
class Task:
    id: object
    owner: object
    content: str
    is_completed: bool
    date: date
    created_at: Optional[datetime]
    kind = "task"


@dataclass
class FreeformNote:
    id: object
    owner: object
    content: str
    date: date
    created_at: Optional[datetime]
    kind = "note"
    is_completed = False


NoteRecord = Union[Task, FreeformNote]


@dataclass
class Category:
    id: object
    name: str
    emoji: str
    group_name: str


@dataclass
class Food:
    id: object
    name: str
    protein_per_unit: float
    unit: str
    default_quantity: float
    emoji: str
    sort_order: int


def decode_expense(row) -> ExpenseRecord:
    return ExpenseRecord(
        id=row["id"],
        owner=row.get("user_id"),
        item_name=row["item_name"],
        category=row["category"],
        amount=float(row["amount"]),
        date=_as_date(row["date"]),
    )


def decode_protein(row) -> ProteinRecord:
    return ProteinRecord(
        id=row["id"],
        owner=row.get("user_id"),
        food_id=row.get("food_id"),
        food_name=row.get("food_name") or "Unknown",
        quantity=float(row.get("quantity") or 0),
        protein_amount=float(row["protein_amount"]),
        date=_as_date(row["date"]),
    )


def decode_water(row) -> WaterRecord:
    return WaterRecord(
        id=row["id"],
        owner=row.get("user_id"),
        amount_ml=float(row["amount_ml"]),
        date=_as_date(row["date"]),
        created_at=_as_datetime(row.get("created_at")),
    )


def decode_note(row) -> NoteRecord:
    # Anything that is not explicitly a freeform note is treated as a task
    common = dict(
        id=row["id"],
        owner=row.get("user_id"),
        content=row["content"],
        date=_as_date(row["date"]),
        created_at=_as_datetime(row.get("created_at")),
    )
    if row.get("type") == "note":
        return FreeformNote(**common)
    return Task(is_completed=bool(row.get("is_completed")), **common)


def decode_category(row) -> Category:
    return Category(id=row["id"], name=row["name"], emoji=row.get("emoji") or "📦",
                    group_name=row["group_name"])


def decode_food(row) -> Food:
    return Food(
        id=row["id"],
        name=row["name"],
        protein_per_unit=float(row["protein_per_unit"]),
        unit=row.get("unit") or "g",
        default_quantity=float(row.get("default_quantity") or 100),
        emoji=row.get("emoji") or "🍽️",
        sort_order=int(row.get("sort_order") or 0),
    )


DECODERS = {
    "expenses": decode_expense,
    "protein_entries": decode_protein,
    "water_entries": decode_water,
    "notes": decode_note,
    "expense_categories": decode_category,
    "protein_foods": decode_food,
}


def decode_rows(collection, rows):
    decoder = DECODERS[collection]
    return [decoder(row) for row in rows]
