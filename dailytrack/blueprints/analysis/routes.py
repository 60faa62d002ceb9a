from flask import Blueprint, current_app, render_template, request, flash
from flask_login import login_required, current_user
from ...aggregates import month_summary
from ...dates import month_bounds, parse_date, parse_month, shift_month, today
from ...errors import ValidationError
from ...helpers import fetch_records


analysis_bp = Blueprint("analysis", __name__, url_prefix="/analysis")

WEEK_DAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@analysis_bp.route("/")
@login_required
def index():
    now = today()
    try:
        month_start = parse_month(request.args.get("month"), default=now)
        selected = parse_date(request.args.get("day")) if request.args.get("day") else None
    except ValidationError as e:
        flash(e.message, "warning")
        month_start, selected = now.replace(day=1), None

    start, end = month_bounds(month_start)
    scope = dict(owner=current_user.id, between=(start, end))
    summary = month_summary(
        month_start,
        expenses=fetch_records("expenses", **scope),
        protein=fetch_records("protein_entries", **scope),
        water=fetch_records("water_entries", **scope),
        notes=fetch_records("notes", **scope),
        protein_goal=current_app.config["PROTEIN_GOAL_G"],
        water_goal=current_app.config["WATER_GOAL_ML"],
    )
    return render_template(
        "analysis/index.html",
        summary=summary,
        month_start=month_start,
        prev_month=shift_month(month_start, -1),
        next_month=shift_month(month_start, 1),
        selected=summary.day(selected) if selected else None,
        now=now,
        week_days=WEEK_DAYS,
    )
