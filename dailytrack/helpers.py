from flask import flash

from .errors import ValidationError
from .records import decode_rows
from .store import get_store


def fetch_records(collection, **filters):
    """List and decode a collection; on failure flash and return an empty list."""
    result = get_store().list(collection, **filters)
    if not result.ok:
        flash(result.error.message, "danger")
        return []
    return decode_rows(collection, result.data)


def require_text(value, label):
    value = (value or "").strip()
    if not value:
        raise ValidationError(f"{label} is required")
    return value


def parse_number(raw, label, allow_zero=False):
    if raw is None or str(raw).strip() == "":
        raise ValidationError(f"{label} is required")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} must be a number")
    if value != value or value in (float("inf"), float("-inf")):
        raise ValidationError(f"{label} must be a number")
    if value < 0 or (value == 0 and not allow_zero):
        raise ValidationError(f"{label} must be greater than zero")
    return value
