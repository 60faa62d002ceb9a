from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from ...aggregates import protein_summary
from ...dates import today
from ...errors import ValidationError
from ...helpers import fetch_records, parse_number
from ...reference import protein_for
from ...store import get_store


protein_bp = Blueprint("protein", __name__, url_prefix="/protein")


def find_food(foods, food_id):
    for food in foods:
        if str(food.id) == str(food_id):
            return food
    return None


@protein_bp.route("/")
@login_required
def index():
    day = today()
    entries = fetch_records("protein_entries", owner=current_user.id, on=day)
    foods = fetch_records("protein_foods", order_by="sort_order")
    return render_template(
        "protein/index.html",
        day=day,
        foods=foods,
        entries=entries,
        summary=protein_summary(entries, goal=current_app.config["PROTEIN_GOAL_G"]),
    )


@protein_bp.route("/add", methods=["POST"])
@login_required
def add_entry():
    foods = fetch_records("protein_foods", order_by="sort_order")
    food = find_food(foods, request.form.get("food_id"))
    if food is None:
        flash("Please pick a food", "danger")
        return redirect(url_for("protein.index"))
    try:
        quantity = parse_number(request.form.get("quantity") or food.default_quantity, "Quantity")
    except ValidationError as e:
        flash(e.message, "danger")
        return redirect(url_for("protein.index"))

    grams = protein_for(food.protein_per_unit, food.unit, quantity)
    result = get_store().insert("protein_entries", {
        "user_id": current_user.id,
        "food_id": food.id,
        "food_name": food.name,
        "quantity": quantity,
        "protein_amount": grams,
        "date": today(),
    })
    if not result.ok:
        flash("Failed to log protein", "danger")
    else:
        flash(f"Added to today's intake: {quantity:g}{food.unit} {food.name} (+{grams:.1f}g protein)", "success")
    return redirect(url_for("protein.index"))


@protein_bp.route("/<record_id>/delete", methods=["POST"])
@login_required
def delete_entry(record_id):
    result = get_store().delete("protein_entries", record_id, owner=current_user.id)
    if not result.ok:
        flash("Failed to remove entry", "danger")
    else:
        flash("Entry removed", "info")
    return redirect(url_for("protein.index"))
