from datetime import date, datetime

import pytz
from dateutil.relativedelta import relativedelta
from flask import current_app

from .errors import ValidationError


def local_now() -> datetime:
    tz = pytz.timezone(current_app.config.get("TIMEZONE", "UTC"))
    return datetime.now(tz)


def today() -> date:
    """Current calendar day in the configured timezone."""
    return local_now().date()


def parse_date(value, default=None) -> date:
    if not value:
        if default is None:
            raise ValidationError("Date is required")
        return default
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(f"Invalid date: {value}")


def parse_month(value, default: date) -> date:
    """Parse YYYY-MM into the first day of that month."""
    if not value:
        return default.replace(day=1)
    try:
        month = datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise ValidationError(f"Invalid month: {value}")
    # neighbouring months must stay inside date's year range
    if not 2 <= month.year <= 9998:
        raise ValidationError(f"Invalid month: {value}")
    return month


def month_bounds(month_start: date):
    end = month_start + relativedelta(months=1) - relativedelta(days=1)
    return month_start, end


def shift_month(month_start: date, months: int) -> date:
    return month_start + relativedelta(months=months)


def day_label(day: date, reference: date) -> str:
    delta = (day - reference).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    if delta == -1:
        return "Yesterday"
    return f"{day:%A, %b} {day.day}"
