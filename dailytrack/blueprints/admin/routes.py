from collections import OrderedDict
from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash
from flask_login import current_user
from ...errors import ValidationError
from ...gate import admin_required
from ...helpers import fetch_records, parse_number, require_text
from ...store import get_store


admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


def back():
    return redirect(url_for("admin.index"))


def admin_users():
    """Admin role rows joined with the email of their user."""
    store = get_store()
    roles = store.list("user_roles", role="admin")
    profiles = store.list("profiles")
    if not roles.ok or not profiles.ok:
        flash("Failed to load admin users", "danger")
        return []
    emails = {p["id"]: p["email"] for p in profiles.data}
    return [
        {"user_id": r["user_id"], "email": emails.get(r["user_id"], "Unknown"), "role": r["role"]}
        for r in roles.data
    ]


def parse_category_form(form):
    return {
        "name": require_text(form.get("name"), "Name"),
        "emoji": (form.get("emoji") or "").strip() or "📦",
        "group_name": require_text(form.get("group_name"), "Group"),
    }


def parse_food_form(form):
    values = {
        "name": require_text(form.get("name"), "Name"),
        "protein_per_unit": parse_number(form.get("protein_per_unit"), "Protein per unit"),
        "unit": (form.get("unit") or "").strip() or "100g",
    }
    if form.get("default_quantity"):
        values["default_quantity"] = parse_number(form.get("default_quantity"), "Default quantity")
    if form.get("emoji"):
        values["emoji"] = form.get("emoji").strip()
    return values


@admin_bp.route("/")
@admin_required
def index():
    categories = fetch_records("expense_categories", order_by="group_name")
    grouped = OrderedDict()
    for cat in categories:
        grouped.setdefault(cat.group_name, []).append(cat)
    return render_template(
        "admin/index.html",
        categories=grouped,
        foods=fetch_records("protein_foods", order_by="sort_order"),
        admins=admin_users(),
    )


# === CATEGORIES ===

@admin_bp.route("/categories/add", methods=["POST"])
@admin_required
def add_category():
    try:
        values = parse_category_form(request.form)
    except ValidationError:
        flash("Please fill all fields", "danger")
        return back()
    result = get_store().insert("expense_categories", values)
    if not result.ok:
        flash("Category already exists" if result.error.conflict else "Error adding category", "danger")
    else:
        flash("Category added", "success")
    return back()


@admin_bp.route("/categories/<record_id>/edit", methods=["POST"])
@admin_required
def edit_category(record_id):
    try:
        values = parse_category_form(request.form)
    except ValidationError:
        flash("Please fill all fields", "danger")
        return back()
    result = get_store().update("expense_categories", record_id, values)
    if not result.ok:
        flash("Category already exists" if result.error.conflict else "Error updating category", "danger")
    else:
        flash("Category updated", "success")
    return back()


@admin_bp.route("/categories/<record_id>/delete", methods=["POST"])
@admin_required
def delete_category(record_id):
    result = get_store().delete("expense_categories", record_id)
    if not result.ok:
        flash("Error deleting category", "danger")
    else:
        flash("Category deleted", "info")
    return back()


# === PROTEIN FOODS ===

@admin_bp.route("/foods/add", methods=["POST"])
@admin_required
def add_food():
    try:
        values = parse_food_form(request.form)
    except ValidationError:
        flash("Please fill all fields", "danger")
        return back()
    foods = fetch_records("protein_foods")
    values["sort_order"] = max((f.sort_order for f in foods), default=0) + 1
    result = get_store().insert("protein_foods", values)
    if not result.ok:
        flash("Protein food already exists" if result.error.conflict else "Error adding protein food", "danger")
    else:
        flash("Protein food added", "success")
    return back()


@admin_bp.route("/foods/<record_id>/edit", methods=["POST"])
@admin_required
def edit_food(record_id):
    try:
        values = parse_food_form(request.form)
    except ValidationError:
        flash("Please fill all fields", "danger")
        return back()
    result = get_store().update("protein_foods", record_id, values)
    if not result.ok:
        flash("Protein food already exists" if result.error.conflict else "Error updating protein food", "danger")
    else:
        flash("Protein food updated", "success")
    return back()


@admin_bp.route("/foods/<record_id>/delete", methods=["POST"])
@admin_required
def delete_food(record_id):
    result = get_store().delete("protein_foods", record_id)
    if not result.ok:
        flash("Error deleting protein food", "danger")
    else:
        flash("Protein food deleted", "info")
    return back()


# === ADMIN USERS ===

@admin_bp.route("/admins/add", methods=["POST"])
@admin_required
def add_admin():
    email = (request.form.get("email") or "").strip().lower()
    if not email:
        flash("Please enter an email", "danger")
        return back()

    store = get_store()
    profile = store.list("profiles", email=email, limit=1)
    if not profile.ok:
        flash("Error adding admin", "danger")
        return back()
    if not profile.data:
        flash("User not found. No user found with that email. They must sign up first.", "danger")
        return back()

    user_id = profile.data[0]["id"]
    result = store.insert("user_roles", {"user_id": user_id, "role": "admin"})
    if not result.ok:
        flash("User is already an admin" if result.error.conflict else "Error adding admin", "danger")
    else:
        current_app.logger.info("User %s granted admin to user %s", current_user.id, user_id)
        flash("Admin added successfully", "success")
    return back()


@admin_bp.route("/admins/<int:user_id>/remove", methods=["POST"])
@admin_required
def remove_admin(user_id):
    if user_id == current_user.id:
        flash("Cannot remove yourself", "danger")
        return back()
    result = get_store().delete_where("user_roles", owner=user_id, role="admin")
    if not result.ok:
        flash("Error removing admin", "danger")
    else:
        current_app.logger.info("User %s revoked admin from user %s", current_user.id, user_id)
        flash("Admin removed", "info")
    return back()
