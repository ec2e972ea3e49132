"""
Business logic for querying a user's exercise history.

Filters are forgiving: a ``from`` or ``to`` bound that does not parse
as a date is ignored, as is a ``limit`` that does not start with
a positive integer.  Only an unknown user id is reported as an error.
"""

import logging
import re
from typing import Any, Optional

from ..core.dates import format_date, try_parse_date
from ..core.store import UserRegistry
from ..schemas.exercise import ExerciseLog, LogEntry

logger = logging.getLogger(__name__)

# Leading integer, as in "2", "2.5" or "2abc".
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_limit(value: Any) -> Optional[int]:
    """Return the leading integer of ``value`` if it is positive, else ``None``.

    Trailing text is dropped, so ``"2.5"`` and ``"2abc"`` both give 2.
    """
    if value is None or isinstance(value, bool):
        return None
    match = LEADING_INT.match(str(value))
    if match is None:
        return None
    limit = int(match.group(1))
    return limit if limit > 0 else None


class LogService:
    """Read filtered views of user logs."""

    @classmethod
    async def get_log(
        cls,
        registry: UserRegistry,
        user_id: str,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> ExerciseLog:
        """Return the log of ``user_id`` filtered by date range and limit.

        Both bounds are inclusive.  Filters apply in the order ``from``,
        ``to``, ``limit``; truncation keeps the earliest logged entries.
        Raises ``UserNotFoundError`` for an unknown id.
        """
        user, entries = registry.snapshot_log(user_id)

        lower = try_parse_date(date_from)
        if lower is not None:
            entries = [entry for entry in entries if entry.date >= lower]
        upper = try_parse_date(date_to)
        if upper is not None:
            entries = [entry for entry in entries if entry.date <= upper]
        cap = parse_limit(limit)
        if cap is not None:
            entries = entries[:cap]

        logger.debug(
            "Log query for user %s (from=%s to=%s limit=%s) returned %d entries",
            user.id, lower, upper, cap, len(entries),
        )
        return ExerciseLog(
            username=user.username,
            count=len(entries),
            id=user.id,
            log=[
                LogEntry(description=entry.description, duration=entry.duration, date=format_date(entry.date))
                for entry in entries
            ],
        )
