from flask import Blueprint, current_app, render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from ...aggregates import water_summary
from ...dates import today
from ...errors import ValidationError
from ...helpers import fetch_records, parse_number
from ...records import decode_rows
from ...store import get_store


water_bp = Blueprint("water", __name__, url_prefix="/water")


def todays_summary():
    entries = fetch_records("water_entries", owner=current_user.id, on=today())
    return water_summary(entries, goal=current_app.config["WATER_GOAL_ML"],
                         glass_ml=current_app.config["GLASS_ML"])


@water_bp.route("/")
@login_required
def index():
    return render_template(
        "water/index.html",
        day=today(),
        summary=todays_summary(),
        quick_amounts=current_app.config["WATER_QUICK_AMOUNTS"],
    )


@water_bp.route("/add", methods=["POST"])
@login_required
def add_water():
    try:
        amount = parse_number(request.form.get("amount_ml"), "Amount")
    except ValidationError as e:
        flash(e.message, "danger")
        return redirect(url_for("water.index"))

    goal = current_app.config["WATER_GOAL_ML"]
    prior = get_store().list("water_entries", owner=current_user.id, on=today())
    result = get_store().insert("water_entries", {
        "user_id": current_user.id,
        "amount_ml": amount,
        "date": today(),
    })
    if not result.ok:
        flash("Failed to log water", "danger")
        return redirect(url_for("water.index"))

    if not prior.ok:
        # without the earlier total the goal crossing is unknown
        flash(f"Water logged: +{amount:g}ml added", "success")
        return redirect(url_for("water.index"))

    before = sum(r.amount_ml for r in decode_rows("water_entries", prior.data))
    new_total = before + amount
    if before < goal <= new_total:
        flash("🎉 Goal Achieved! You've hit your daily water goal!", "success")
    else:
        flash(f"Water logged: +{amount:g}ml added (Total: {new_total / 1000:.1f}L)", "success")
    return redirect(url_for("water.index"))


@water_bp.route("/<record_id>/delete", methods=["POST"])
@login_required
def delete_water(record_id):
    result = get_store().delete("water_entries", record_id, owner=current_user.id)
    if not result.ok:
        flash("Failed to delete water entry", "danger")
    else:
        flash("Water entry deleted", "info")
    return redirect(url_for("water.index"))
