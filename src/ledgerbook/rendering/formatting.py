"""Number and date formatting for printed statements.

All helpers are pure functions so they are safe to call from concurrent
statement builds.
"""

from datetime import date, datetime
from typing import Optional

FOREVER = "Forever"


def format_amount(amount: float) -> str:
    """Format an amount with two decimals and comma thousands separators.

    >>> format_amount(1234567.5)
    '1,234,567.50'
    """
    return f"{amount:,.2f}"


def format_currency(amount: float) -> str:
    """Format an amount with a leading dollar sign, e.g. ``$1,234.50``.

    Negative amounts print as ``-$1,234.50``.
    """
    if amount < 0 and round(amount, 2) != 0:
        return f"-${format_amount(-amount)}"
    return f"${format_amount(abs(amount))}"


def format_signed_currency(amount: float, sign: str) -> str:
    """Format an absolute amount with an explicit sign, e.g. ``-$12.00``."""
    return f"{sign}${format_amount(abs(amount))}"


def format_date(value: Optional[date]) -> str:
    """Format a date as ``MMM dd, yyyy``; empty string when unknown."""
    if value is None:
        return ""
    return value.strftime("%b %d, %Y")


def format_time(value: Optional[datetime]) -> str:
    """Format a time of day as ``h:mm AM``; empty string when unknown."""
    if value is None:
        return ""
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def format_period_bound(value: Optional[date]) -> str:
    """Format a statement period bound; unbounded prints ``Forever``."""
    if value is None:
        return FOREVER
    return format_date(value)
