"""Calendar date and year-month primitives.

Dates are exchanged as YYYY-MM-DD and months as YYYY-MM. Parsing is strict:
"2024-1-5" and "2024-01-05T00:00" are both rejected.
"""

import re
from datetime import date, datetime, timezone
from typing import Tuple

from dateutil.relativedelta import relativedelta

from services.errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MONTH_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}")


def parse_date(value, field: str = "PostedDate") -> date:
    """Parse a calendar date.

    Args:
        value: A date object or a YYYY-MM-DD string.
        field: Field name used in the error message.

    Returns:
        The parsed date.

    Raises:
        ValidationError: If the value is not a valid calendar date.
    """
    # datetime is a date subclass but carries a time-of-day
    if isinstance(value, date) and not isinstance(value, datetime):
        return value

    message = f"{field} must be in YYYY-MM-DD format"
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise ValidationError(message)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as e:
        raise ValidationError(message) from e


def parse_month(value) -> date:
    """Parse a YYYY-MM string into the first day of that month.

    Raises:
        ValidationError: If the value is not a valid year-month.
    """
    message = "Month must be in YYYY-MM format"
    if not isinstance(value, str) or not _MONTH_PATTERN.fullmatch(value):
        raise ValidationError(message)
    try:
        return datetime.strptime(value, MONTH_FORMAT).date()
    except ValueError as e:
        raise ValidationError(message) from e


def month_bounds(month_start: date) -> Tuple[date, date]:
    """Get the inclusive first and last day of the month containing a date."""
    first = month_start.replace(day=1)
    last = first + relativedelta(day=31)
    return first, last


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_month(value: date) -> str:
    return value.strftime(MONTH_FORMAT)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime, used for creation timestamps."""
    return datetime.now(timezone.utc)
