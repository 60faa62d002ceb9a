from datetime import timedelta
from flask import Blueprint, render_template, request, redirect, url_for, flash
from flask_login import login_required, current_user
from ...aggregates import notes_summary
from ...dates import day_label, parse_date, today
from ...errors import ValidationError
from ...helpers import fetch_records, require_text
from ...models.note import NOTE_TYPES
from ...records import decode_note
from ...store import get_store


notes_bp = Blueprint("notes", __name__, url_prefix="/notes")

QUICK_JUMP_DAYS = 7


def selected_day(source):
    try:
        return parse_date(source.get("date"), default=today())
    except ValidationError as e:
        flash(e.message, "warning")
        return today()


def back_to(day):
    return redirect(url_for("notes.index", date=day.isoformat()))


@notes_bp.route("/")
@login_required
def index():
    day = selected_day(request.args)
    now = today()
    items = fetch_records("notes", owner=current_user.id, on=day, order_by="created_at")
    return render_template(
        "notes/index.html",
        day=day,
        label=day_label(day, now),
        is_today=day == now,
        prev_day=day - timedelta(days=1),
        next_day=day + timedelta(days=1),
        quick_jump=[(now + timedelta(days=i), day_label(now + timedelta(days=i), now))
                    for i in range(QUICK_JUMP_DAYS)],
        summary=notes_summary(items),
    )


@notes_bp.route("/add", methods=["POST"])
@login_required
def add_note():
    day = selected_day(request.form)
    note_type = request.form.get("type") or "task"
    if note_type not in NOTE_TYPES:
        note_type = "task"
    try:
        content = require_text(request.form.get("content"), "Note")
    except ValidationError as e:
        flash(e.message, "danger")
        return back_to(day)

    result = get_store().insert("notes", {
        "user_id": current_user.id,
        "content": content,
        "type": note_type,
        "is_completed": False,
        "date": day,
    })
    if not result.ok:
        flash("Failed to add note", "danger")
    elif note_type == "task":
        flash("Task added to your list", "success")
    else:
        flash("Note added", "success")
    return back_to(day)


@notes_bp.route("/<record_id>/toggle", methods=["POST"])
@login_required
def toggle_note(record_id):
    day = selected_day(request.form)
    store = get_store()
    found = store.get("notes", record_id, owner=current_user.id)
    if not found.ok:
        flash("Failed to update note", "danger")
        return back_to(day)
    note = decode_note(found.data)
    if note.kind != "task":
        flash("Only tasks can be completed", "warning")
        return back_to(note.date)
    result = store.update("notes", record_id, {"is_completed": not note.is_completed}, owner=current_user.id)
    if not result.ok:
        flash("Failed to update note", "danger")
    return back_to(note.date)


@notes_bp.route("/<record_id>/delete", methods=["POST"])
@login_required
def delete_note(record_id):
    day = selected_day(request.form)
    result = get_store().delete("notes", record_id, owner=current_user.id)
    if not result.ok:
        flash("Failed to delete note", "danger")
    else:
        flash("Note deleted", "info")
    return back_to(day)
