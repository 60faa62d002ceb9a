from .user import User
from .user_role import UserRole
from .expense import Expense
from .protein_entry import ProteinEntry
from .water_entry import WaterEntry
from .note import Note
from .expense_category import ExpenseCategory
from .protein_food import ProteinFood

__all__ = [
    "User",
    "UserRole",
    "Expense",
    "ProteinEntry",
    "WaterEntry",
    "Note",
    "ExpenseCategory",
    "ProteinFood",
]
