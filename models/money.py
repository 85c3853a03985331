"""Money primitive.

Amounts are always an integer count of cents. Floats are rejected outright so
that sums never pick up rounding drift.
"""

import re
from typing import NewType

from services.errors import ValidationError

Cents = NewType("Cents", int)

_CENTS_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_cents(value, field: str = "AmountCents") -> Cents:
    """Coerce raw input into a cents amount.

    Args:
        value: An int, or a string of digits with an optional sign.
        field: Field name used in the error message.

    Returns:
        The amount as Cents.

    Raises:
        ValidationError: If the value is not a whole number of cents.
    """
    # bool is an int subclass; True is not one cent
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a whole number of cents")
    if isinstance(value, int):
        return Cents(value)
    if isinstance(value, str) and _CENTS_PATTERN.fullmatch(value.strip()):
        return Cents(int(value.strip()))
    raise ValidationError(f"{field} must be a whole number of cents")


def format_cents(cents: int) -> str:
    """Render cents as a human readable amount, e.g. 123456 -> "1,234.56"."""
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(cents), 100)
    return f"{sign}{whole:,}.{fraction:02d}"
