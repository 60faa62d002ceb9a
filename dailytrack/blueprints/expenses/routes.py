from collections import OrderedDict
from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from ...aggregates import expense_summary
from ...dates import parse_date, today
from ...errors import ValidationError
from ...helpers import fetch_records, parse_number, require_text
from ...store import get_store


expenses_bp = Blueprint("expenses", __name__, url_prefix="/expenses")


def grouped_categories():
    """Categories keyed by group name, in display order."""
    groups = OrderedDict()
    for cat in fetch_records("expense_categories", order_by="group_name"):
        groups.setdefault(cat.group_name, []).append(cat)
    return groups


def parse_expense_form(form, default_day):
    return {
        "item_name": require_text(form.get("item_name"), "Item name"),
        "category": require_text(form.get("category"), "Category"),
        "amount": parse_number(form.get("amount"), "Amount", allow_zero=True),
        "date": parse_date(form.get("date"), default=default_day),
    }


@expenses_bp.route("/")
@login_required
def list_expenses():
    day = today()
    expenses = fetch_records("expenses", owner=current_user.id, on=day)
    categories = grouped_categories()
    emojis = {c.name: c.emoji for group in categories.values() for c in group}
    return render_template(
        "expenses/list.html",
        day=day,
        expenses=expenses,
        summary=expense_summary(expenses),
        categories=categories,
        emojis=emojis,
    )


@expenses_bp.route("/add", methods=["POST"])
@login_required
def add_expense():
    try:
        values = parse_expense_form(request.form, today())
    except ValidationError as e:
        flash(f"Missing fields: {e.message}", "danger")
        return redirect(url_for("expenses.list_expenses"))

    result = get_store().insert("expenses", dict(values, user_id=current_user.id))
    if not result.ok:
        flash("Failed to add expense", "danger")
    else:
        flash(f"Expense added: ₹{values['amount']:g} for {values['item_name']}", "success")
    return redirect(url_for("expenses.list_expenses"))


@expenses_bp.route("/<record_id>/delete", methods=["POST"])
@login_required
def delete_expense(record_id):
    result = get_store().delete("expenses", record_id, owner=current_user.id)
    if not result.ok:
        flash("Failed to delete expense", "danger")
    else:
        flash("Expense deleted", "info")
    return redirect(url_for("expenses.list_expenses"))
