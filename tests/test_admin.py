from dailytrack.extensions import db
from dailytrack.models import Expense, ExpenseCategory, ProteinFood, UserRole
from tests.conftest import make_user


def admin_user_ids(app):
    with app.app_context():
        return sorted(r.user_id for r in UserRole.query.filter_by(role="admin"))


def test_admin_panel_lists_reference_data(admin_client):
    body = admin_client.get("/admin/").get_data(as_text=True)
    assert "Admin Panel" in body
    assert "Food &amp; Beverages" in body
    assert "Soy Chunks" in body
    assert "admin@example.com" in body


def test_grant_admin_by_email(app, admin_client, admin_id):
    other = make_user(app, "friend@example.com")
    response = admin_client.post("/admin/admins/add", data={"email": "Friend@example.com"},
                                 follow_redirects=True)
    assert "Admin added successfully" in response.get_data(as_text=True)
    assert admin_user_ids(app) == sorted([admin_id, other])


def test_grant_admin_to_unknown_email(app, admin_client, admin_id):
    response = admin_client.post("/admin/admins/add", data={"email": "ghost@example.com"},
                                 follow_redirects=True)
    assert "User not found" in response.get_data(as_text=True)
    assert admin_user_ids(app) == [admin_id]


def test_grant_admin_twice_is_friendly(app, admin_client):
    make_user(app, "friend@example.com")
    admin_client.post("/admin/admins/add", data={"email": "friend@example.com"})
    response = admin_client.post("/admin/admins/add", data={"email": "friend@example.com"},
                                 follow_redirects=True)
    assert "User is already an admin" in response.get_data(as_text=True)


def test_admin_cannot_remove_self(app, admin_client, admin_id):
    response = admin_client.post(f"/admin/admins/{admin_id}/remove", follow_redirects=True)
    assert "Cannot remove yourself" in response.get_data(as_text=True)
    assert admin_user_ids(app) == [admin_id]


def test_remove_other_admin_demotes_them(app, admin_client, admin_id):
    other = make_user(app, "second@example.com", admin=True)
    admin_client.post(f"/admin/admins/{other}/remove")
    assert admin_user_ids(app) == [admin_id]
    with app.app_context():
        # the plain user role survives
        assert UserRole.query.filter_by(user_id=other, role="user").count() == 1


def test_category_crud(app, admin_client):
    admin_client.post("/admin/categories/add", data={"name": "Pets", "emoji": "🐶", "group_name": "Home"})
    with app.app_context():
        cat = ExpenseCategory.query.filter_by(name="Pets").one()
        cat_id = cat.id
        assert cat.group_name == "Home"

    admin_client.post(f"/admin/categories/{cat_id}/edit",
                      data={"name": "Pet Care", "emoji": "🐾", "group_name": "Home"})
    with app.app_context():
        assert db.session.get(ExpenseCategory, cat_id).name == "Pet Care"

    admin_client.post(f"/admin/categories/{cat_id}/delete")
    with app.app_context():
        assert db.session.get(ExpenseCategory, cat_id) is None


def test_category_requires_all_fields(app, admin_client):
    response = admin_client.post("/admin/categories/add", data={"name": "Orphan"}, follow_redirects=True)
    assert "Please fill all fields" in response.get_data(as_text=True)
    with app.app_context():
        assert ExpenseCategory.query.filter_by(name="Orphan").count() == 0


def test_duplicate_category_name(admin_client):
    response = admin_client.post("/admin/categories/add", data={"name": "Tea", "group_name": "Drinks"},
                                 follow_redirects=True)
    assert "Category already exists" in response.get_data(as_text=True)


def test_deleting_category_keeps_history(app, admin_client, admin_id):
    admin_client.post("/expenses/add", data={"item_name": "Chai", "category": "Tea", "amount": "15"})
    with app.app_context():
        tea_id = ExpenseCategory.query.filter_by(name="Tea").one().id
    admin_client.post(f"/admin/categories/{tea_id}/delete")
    with app.app_context():
        assert Expense.query.filter_by(user_id=admin_id).one().category == "Tea"


def test_food_crud_appends_sort_order(app, admin_client):
    with app.app_context():
        last = max(f.sort_order for f in ProteinFood.query.all())
    admin_client.post("/admin/foods/add", data={"name": "Tempeh", "protein_per_unit": "19", "unit": "g"})
    with app.app_context():
        food = ProteinFood.query.filter_by(name="Tempeh").one()
        food_id = food.id
        assert food.sort_order == last + 1

    admin_client.post(f"/admin/foods/{food_id}/edit", data={"name": "Tempeh", "protein_per_unit": "20",
                                                            "unit": "g"})
    with app.app_context():
        assert db.session.get(ProteinFood, food_id).protein_per_unit == 20

    admin_client.post(f"/admin/foods/{food_id}/delete")
    with app.app_context():
        assert db.session.get(ProteinFood, food_id) is None


def test_food_requires_protein_value(app, admin_client):
    response = admin_client.post("/admin/foods/add", data={"name": "Air", "protein_per_unit": ""},
                                 follow_redirects=True)
    assert "Please fill all fields" in response.get_data(as_text=True)


def test_admin_actions_denied_for_regular_users(app, auth_client):
    response = auth_client.post("/admin/categories/add", data={"name": "Hack", "group_name": "X"},
                                follow_redirects=True)
    assert "Access Denied" in response.get_data(as_text=True)
    with app.app_context():
        assert ExpenseCategory.query.filter_by(name="Hack").count() == 0
