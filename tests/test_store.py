import json
from datetime import date

import pytest

from dailytrack.store import LocalStore, SQLStore

DAY = date(2024, 1, 1)


@pytest.fixture
def sql_store(app, user_id):
    with app.app_context():
        yield SQLStore()


@pytest.fixture
def local_store(app, tmp_path):
    with app.app_context():
        yield LocalStore(tmp_path / "store.json")


@pytest.fixture(params=["sql", "local"])
def store(request, app, user_id, tmp_path):
    with app.app_context():
        if request.param == "sql":
            yield SQLStore()
        else:
            yield LocalStore(tmp_path / "store.json")


def tea(owner, on=DAY):
    return {"user_id": owner, "item_name": "Tea", "category": "tea", "amount": 20, "date": on}


def test_expense_round_trip(store, user_id):
    inserted = store.insert("expenses", tea(user_id))
    assert inserted.ok

    listed = store.list("expenses", owner=user_id, on=DAY)
    assert listed.ok
    assert len(listed.data) == 1
    assert listed.data[0]["amount"] == 20
    assert listed.data[0]["category"] == "tea"

    assert store.delete("expenses", inserted.data["id"], owner=user_id).ok
    assert store.list("expenses", owner=user_id, on=DAY).data == []


def test_records_are_scoped_to_owner(store, user_id):
    store.insert("expenses", tea(user_id))
    store.insert("expenses", tea(user_id + 1))
    rows = store.list("expenses", owner=user_id).data
    assert [r["user_id"] for r in rows] == [user_id]


def test_delete_of_someone_elses_record_is_not_found(store, user_id):
    row = store.insert("expenses", tea(user_id)).data
    result = store.delete("expenses", row["id"], owner=user_id + 1)
    assert not result.ok
    assert result.error.not_found
    assert len(store.list("expenses", owner=user_id).data) == 1


def test_list_between_is_inclusive(store, user_id):
    for day in (date(2024, 1, 31), date(2024, 2, 1), date(2024, 2, 29), date(2024, 3, 1)):
        store.insert("water_entries", {"user_id": user_id, "amount_ml": 250, "date": day})
    rows = store.list("water_entries", owner=user_id, between=(date(2024, 2, 1), date(2024, 2, 29))).data
    assert len(rows) == 2


def test_update_and_get(store, user_id):
    row = store.insert("notes", {"user_id": user_id, "content": "Buy milk", "type": "task",
                                 "is_completed": False, "date": DAY}).data
    assert store.update("notes", row["id"], {"is_completed": True}, owner=user_id).ok
    assert store.get("notes", row["id"], owner=user_id).data["is_completed"] is True


def test_delete_where_only_touches_matching_day(store, user_id):
    store.insert("water_entries", {"user_id": user_id, "amount_ml": 250, "date": DAY})
    store.insert("water_entries", {"user_id": user_id, "amount_ml": 500, "date": date(2024, 1, 2)})
    assert store.delete_where("water_entries", owner=user_id, on=DAY).data == 1
    rows = store.list("water_entries", owner=user_id).data
    assert [r["amount_ml"] for r in rows] == [500]


def test_reference_data_is_available(store):
    foods = store.list("protein_foods", order_by="sort_order").data
    assert foods[0]["name"] == "Soy Chunks"
    categories = store.list("expense_categories", name="Tea").data
    assert categories[0]["group_name"] == "Food & Beverages"


def test_duplicate_role_is_a_conflict(sql_store, user_id):
    first = sql_store.insert("user_roles", {"user_id": user_id, "role": "admin"})
    assert first.ok
    second = sql_store.insert("user_roles", {"user_id": user_id, "role": "admin"})
    assert not second.ok
    assert second.error.conflict
    assert sql_store.has_role(user_id, "admin")


def test_profiles_hide_password_hash(sql_store, user_id):
    rows = sql_store.list("profiles", email="user@example.com").data
    assert rows == [{"id": user_id, "email": "user@example.com", "name": "Tester"}]


def test_profiles_are_read_only(sql_store):
    result = sql_store.insert("profiles", {"email": "x@example.com"})
    assert not result.ok


def test_sql_update_missing_record(sql_store):
    result = sql_store.update("expenses", 999, {"amount": 5})
    assert result.error.not_found
    assert sql_store.delete("expenses", "not-a-number").error.not_found


def test_local_store_uses_fixed_keys(local_store, tmp_path):
    local_store.insert("expenses", tea(1))
    local_store.insert("notes", {"user_id": 1, "content": "x", "type": "note", "date": DAY})
    data = json.loads((tmp_path / "store.json").read_text(encoding="utf-8"))
    assert set(data) == {"daily_expenses", "daily_notes"}
    assert data["daily_expenses"][0]["date"] == "2024-01-01"
    assert "created_at" in data["daily_notes"][0]


def test_local_store_has_no_roles(local_store):
    assert local_store.list("user_roles").data == []
    assert not local_store.has_role(1, "admin")
    assert not local_store.insert("user_roles", {"user_id": 1, "role": "admin"}).ok
    assert not local_store.insert("expense_categories", {"name": "X", "group_name": "Y"}).ok


def test_local_store_reports_corrupt_file(local_store, tmp_path):
    (tmp_path / "store.json").write_text("{not json", encoding="utf-8")
    result = local_store.list("expenses")
    assert not result.ok
    assert not local_store.insert("expenses", tea(1)).ok
