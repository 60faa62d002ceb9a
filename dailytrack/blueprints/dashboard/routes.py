from flask import Blueprint, current_app, render_template, redirect, url_for, flash
from flask_login import login_required, current_user
from ...aggregates import expense_summary, notes_summary, protein_summary, water_summary
from ...dates import today
from ...helpers import fetch_records
from ...store import get_store


dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")

RESETTABLE = ("expenses", "protein_entries", "water_entries")


@dashboard_bp.route("/")
@login_required
def index():
    day = today()
    scope = dict(owner=current_user.id, on=day)
    expenses = expense_summary(fetch_records("expenses", **scope))
    protein = protein_summary(fetch_records("protein_entries", **scope),
                              goal=current_app.config["PROTEIN_GOAL_G"])
    water = water_summary(fetch_records("water_entries", **scope),
                          goal=current_app.config["WATER_GOAL_ML"],
                          glass_ml=current_app.config["GLASS_ML"])
    notes = notes_summary(fetch_records("notes", **scope))
    return render_template(
        "dashboard/index.html",
        day=day,
        expenses=expenses,
        protein=protein,
        water=water,
        notes=notes,
    )


@dashboard_bp.route("/reset", methods=["POST"])
@login_required
def reset_today():
    """Clear today's expense, protein and water records."""
    store = get_store()
    day = today()
    failed = [c for c in RESETTABLE if not store.delete_where(c, owner=current_user.id, on=day).ok]
    if failed:
        flash("Some of today's data could not be cleared", "danger")
    else:
        flash("Today's data has been cleared.", "info")
    return redirect(url_for("dashboard.index"))
