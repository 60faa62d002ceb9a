"""
Daily and monthly aggregates for the tracking screens.
"""
from __future__ import annotations

import calendar
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

PROTEIN_GOAL_G = 100.0
WATER_GOAL_ML = 4000.0
GLASS_ML = 250
RECENT_WATER_ENTRIES = 5


@dataclass
class GoalProgress:
    total: float
    goal: float

    @property
    def percent(self) -> float:
        if self.goal <= 0:
            return 0.0
        return self.total / self.goal * 100

    @property
    def display_percent(self) -> float:
        """Percent capped at 100 for progress bars."""
        return min(self.percent, 100.0)

    @property
    def goal_met(self) -> bool:
        return self.total >= self.goal

    @property
    def remaining(self) -> float:
        return max(self.goal - self.total, 0.0)

    @property
    def overage(self) -> float:
        return max(self.total - self.goal, 0.0)


def progress_level(value: float, goal: float) -> str:
    """Bucket a value against its goal for calendar colouring."""
    pct = value / goal * 100 if goal > 0 else 0
    if pct >= 100:
        return "full"
    if pct >= 75:
        return "high"
    if pct >= 50:
        return "mid"
    return "low"


# === EXPENSES ===

@dataclass
class ExpenseSummary:
    total: float
    by_category: Dict[str, float]
    count: int


def expense_summary(expenses) -> ExpenseSummary:
    """Total spend plus a per-category breakdown, largest first."""
    by_category: Dict[str, float] = {}
    for e in expenses:
        by_category[e.category] = by_category.get(e.category, 0.0) + e.amount
    ordered = OrderedDict(sorted(by_category.items(), key=lambda kv: kv[1], reverse=True))
    return ExpenseSummary(total=sum(e.amount for e in expenses), by_category=ordered, count=len(expenses))


# === PROTEIN ===

@dataclass
class FoodGroup:
    food_name: str
    entries: list = field(default_factory=list)
    total_protein: float = 0.0


@dataclass
class ProteinSummary:
    progress: GoalProgress
    by_food: List[FoodGroup]


def protein_summary(entries, goal: float = PROTEIN_GOAL_G) -> ProteinSummary:
    groups: Dict[str, FoodGroup] = OrderedDict()
    for entry in entries:
        group = groups.setdefault(entry.food_name, FoodGroup(food_name=entry.food_name))
        group.entries.append(entry)
        group.total_protein += entry.protein_amount
    total = sum(e.protein_amount for e in entries)
    return ProteinSummary(progress=GoalProgress(total=total, goal=goal), by_food=list(groups.values()))


# === WATER ===

@dataclass
class WaterSummary:
    progress: GoalProgress
    glasses: int
    glasses_goal: int
    recent: list

    @property
    def glasses_to_goal(self) -> int:
        return max(self.glasses_goal - self.glasses, 0)

    @property
    def litres(self) -> float:
        return self.progress.total / 1000


def water_summary(entries, goal: float = WATER_GOAL_ML, glass_ml: int = GLASS_ML) -> WaterSummary:
    total = sum(e.amount_ml for e in entries)
    recent = sorted(entries, key=lambda e: e.created_at or datetime.min, reverse=True)[:RECENT_WATER_ENTRIES]
    return WaterSummary(
        progress=GoalProgress(total=total, goal=goal),
        glasses=int(total // glass_ml),
        glasses_goal=int(goal // glass_ml),
        recent=recent,
    )


# === NOTES ===

@dataclass
class NotesSummary:
    tasks: list
    notes: list

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self.tasks if t.is_completed)

    @property
    def task_count(self) -> int:
        return len(self.tasks)

    @property
    def completion_ratio(self) -> float:
        """Completed tasks over all tasks; freeform notes do not count."""
        if not self.tasks:
            return 0.0
        return self.completed_count / self.task_count

    @property
    def completion_percent(self) -> int:
        return round(self.completion_ratio * 100)


def notes_summary(items) -> NotesSummary:
    tasks = [n for n in items if n.kind == "task"]
    notes = [n for n in items if n.kind == "note"]
    return NotesSummary(tasks=tasks, notes=notes)


# === MONTHLY ===

@dataclass
class DaySummary:
    date: date
    expenses: float = 0.0
    protein: float = 0.0
    water: float = 0.0
    notes: int = 0
    has_data: bool = False
    protein_goal: float = PROTEIN_GOAL_G
    water_goal: float = WATER_GOAL_ML

    @property
    def protein_met(self) -> bool:
        return self.protein >= self.protein_goal

    @property
    def water_met(self) -> bool:
        return self.water >= self.water_goal

    @property
    def protein_level(self) -> str:
        return progress_level(self.protein, self.protein_goal)

    @property
    def water_level(self) -> str:
        return progress_level(self.water, self.water_goal)


@dataclass
class MonthSummary:
    month_start: date
    days: Dict[date, DaySummary]

    @property
    def total_expenses(self) -> float:
        return sum(d.expenses for d in self.days.values())

    @property
    def protein_goal_days(self) -> int:
        return sum(1 for d in self.days.values() if d.protein_met)

    @property
    def water_goal_days(self) -> int:
        return sum(1 for d in self.days.values() if d.water_met)

    @property
    def active_days(self) -> int:
        return sum(1 for d in self.days.values() if d.has_data)

    def day(self, on: date) -> Optional[DaySummary]:
        return self.days.get(on)

    def weeks(self) -> List[List[Optional[DaySummary]]]:
        """Calendar rows starting on Sunday, padded with None."""
        padding = (self.month_start.weekday() + 1) % 7
        cells: List[Optional[DaySummary]] = [None] * padding + list(self.days.values())
        cells += [None] * (-len(cells) % 7)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def month_summary(month_start: date, expenses=(), protein=(), water=(), notes=(),
                  protein_goal: float = PROTEIN_GOAL_G, water_goal: float = WATER_GOAL_ML) -> MonthSummary:
    """Per-day sums for every day of the month containing `month_start`.

    Records dated outside the month are ignored.
    """
    first = month_start.replace(day=1)
    n_days = calendar.monthrange(first.year, first.month)[1]
    days = OrderedDict(
        (first + timedelta(days=i), DaySummary(date=first + timedelta(days=i),
                                               protein_goal=protein_goal, water_goal=water_goal))
        for i in range(n_days)
    )

    def bucket(on):
        day = days.get(on)
        if day is not None:
            day.has_data = True
        return day

    for e in expenses:
        day = bucket(e.date)
        if day:
            day.expenses += e.amount
    for p in protein:
        day = bucket(p.date)
        if day:
            day.protein += p.protein_amount
    for w in water:
        day = bucket(w.date)
        if day:
            day.water += w.amount_ml
    for n in notes:
        day = bucket(n.date)
        if day:
            day.notes += 1

    return MonthSummary(month_start=first, days=days)
