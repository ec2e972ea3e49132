"""
Calendar date parsing and rendering.

Dates are exchanged as ``yyyy-mm-dd`` strings on input and rendered as
``"Mon Jan 01 1990"`` on output.  Weekday and month names are spelled
out here rather than taken from ``strftime`` so the output does not
depend on the process locale.
"""

from datetime import date, datetime
from typing import Any, Optional

from .errors import InvalidDateError

INPUT_FORMAT = "%Y-%m-%d"

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_date(value: Any) -> date:
    """Parse a ``yyyy-mm-dd`` string into a ``date``.

    Raises ``InvalidDateError`` for anything that is not a string in
    that format or that names a non‑existent day (e.g. ``2023-02-30``).
    """
    if not isinstance(value, str):
        raise InvalidDateError()
    try:
        return datetime.strptime(value.strip(), INPUT_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError() from exc


def try_parse_date(value: Any) -> Optional[date]:
    """Return the parsed date, or ``None`` if ``value`` is absent or invalid."""
    if value is None or value == "":
        return None
    try:
        return parse_date(value)
    except InvalidDateError:
        return None


def format_date(value: date) -> str:
    """Render ``value`` as ``"Www Mmm DD YYYY"``."""
    return "%s %s %02d %04d" % (
        WEEKDAYS[value.weekday()],
        MONTHS[value.month - 1],
        value.day,
        value.year,
    )
