from datetime import date, datetime

import pytest

from dailytrack.aggregates import (
    GoalProgress,
    expense_summary,
    month_summary,
    notes_summary,
    progress_level,
    protein_summary,
    water_summary,
)
from dailytrack.records import ExpenseRecord, FreeformNote, ProteinRecord, Task, WaterRecord
from dailytrack.reference import protein_for

DAY = date(2024, 1, 15)


def expense(amount, category="Tea", on=DAY, id=1):
    return ExpenseRecord(id=id, owner=1, item_name="x", category=category, amount=amount, date=on)


def protein(grams, food="Paneer", on=DAY):
    return ProteinRecord(id=1, owner=1, food_id=None, food_name=food, quantity=100,
                         protein_amount=grams, date=on)


def water(ml, on=DAY, minute=0):
    return WaterRecord(id=minute, owner=1, amount_ml=ml, date=on,
                       created_at=datetime(2024, 1, 15, 8, minute))


def task(done, on=DAY):
    return Task(id=1, owner=1, content="t", is_completed=done, date=on, created_at=None)


def note(on=DAY):
    return FreeformNote(id=2, owner=1, content="n", date=on, created_at=None)


def test_expense_total_matches_breakdown():
    items = [expense(20, "Tea"), expense(35.5, "Lunch"), expense(10, "Tea")]
    summary = expense_summary(items)
    assert summary.total == pytest.approx(65.5)
    assert summary.by_category == {"Lunch": 35.5, "Tea": 30}
    assert sum(summary.by_category.values()) == pytest.approx(summary.total)
    assert list(summary.by_category) == ["Lunch", "Tea"]


def test_expense_summary_empty():
    summary = expense_summary([])
    assert summary.total == 0
    assert summary.by_category == {}


def test_protein_goal_boundary():
    exact = protein_summary([protein(60), protein(40)]).progress
    assert exact.goal_met
    assert exact.remaining == 0

    short = protein_summary([protein(99.99)]).progress
    assert not short.goal_met
    assert short.remaining == pytest.approx(0.01)


def test_protein_groups_by_food():
    summary = protein_summary([protein(18, "Paneer"), protein(6, "Eggs"), protein(9, "Paneer")])
    assert [(g.food_name, g.total_protein) for g in summary.by_food] == [("Paneer", 27), ("Eggs", 6)]


def test_water_percentage_recomputed_after_delete():
    entries = [water(300, minute=1), water(250, minute=2)]
    summary = water_summary(entries)
    assert summary.progress.total == 550
    assert summary.progress.percent == pytest.approx(13.75)
    assert summary.glasses == 2

    summary = water_summary(entries[:1])
    assert summary.progress.total == 300
    assert summary.progress.percent == pytest.approx(7.5)


def test_water_recent_entries_newest_first():
    entries = [water(100, minute=m) for m in range(7)]
    recent = water_summary(entries).recent
    assert len(recent) == 5
    assert [e.id for e in recent] == [6, 5, 4, 3, 2]


def test_water_glasses_to_goal():
    summary = water_summary([water(1000)])
    assert summary.glasses == 4
    assert summary.glasses_goal == 16
    assert summary.glasses_to_goal == 12
    assert summary.litres == 1.0


def test_display_percent_is_capped_but_overage_is_not():
    progress = GoalProgress(total=5000, goal=4000)
    assert progress.percent == 125
    assert progress.display_percent == 100
    assert progress.overage == 1000
    assert progress.remaining == 0


def test_notes_ratio_without_tasks_is_zero():
    summary = notes_summary([note()])
    assert summary.completion_ratio == 0
    assert summary.completion_percent == 0


def test_notes_ratio_excludes_freeform_notes():
    summary = notes_summary([task(True), task(False), task(False), note(), note()])
    assert summary.task_count == 3
    assert summary.completion_ratio == pytest.approx(1 / 3)
    assert summary.completion_percent == 33
    assert len(summary.notes) == 2


def test_month_day_without_records_has_no_data():
    summary = month_summary(date(2024, 2, 1))
    assert len(summary.days) == 29
    assert not any(d.has_data for d in summary.days.values())
    assert summary.total_expenses == 0
    assert summary.protein_goal_days == 0
    assert summary.water_goal_days == 0


def test_month_water_only_day():
    summary = month_summary(DAY, water=[water(500)])
    day = summary.day(DAY)
    assert day.has_data
    assert day.water == 500
    assert day.protein == 0
    assert day.expenses == 0
    assert not summary.day(date(2024, 1, 16)).has_data


def test_month_totals():
    other = date(2024, 1, 20)
    summary = month_summary(
        DAY,
        expenses=[expense(20), expense(30, on=other), expense(99, on=date(2024, 2, 1))],
        protein=[protein(100), protein(50, on=other)],
        water=[water(4000), water(4500, on=other)],
        notes=[task(False), note()],
    )
    assert summary.total_expenses == 50
    assert summary.protein_goal_days == 1
    assert summary.water_goal_days == 2
    assert summary.active_days == 2
    assert summary.day(DAY).notes == 2


def test_month_weeks_start_on_sunday():
    # 1 January 2024 is a Monday
    weeks = month_summary(date(2024, 1, 1)).weeks()
    assert weeks[0][0] is None
    assert weeks[0][1].date == date(2024, 1, 1)
    assert all(len(w) == 7 for w in weeks)
    # 1 September 2024 is a Sunday
    assert month_summary(date(2024, 9, 1)).weeks()[0][0].date == date(2024, 9, 1)


@pytest.mark.parametrize("value,level", [(100, "full"), (80, "high"), (50, "mid"), (10, "low")])
def test_progress_level(value, level):
    assert progress_level(value, 100) == level


def test_protein_for_units():
    assert protein_for(18, "g", 150) == pytest.approx(27)
    assert protein_for(6, "piece", 3) == 18
    assert protein_for(25, "scoop", 1) == 25
    assert protein_for(3.4, "ml", 250) == pytest.approx(8.5)
