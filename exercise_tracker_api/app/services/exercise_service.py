"""
Business logic for logging exercises against a user.

The order of checks matters to clients: the user is looked up first
(an unknown id is a lenient error), then the required fields are
validated (HTTP 400), and only then is the optional date parsed (an
unparseable date is again a lenient error).  The log is only touched
once every check has passed.
"""

import logging
from datetime import date
from typing import Any, Callable, Mapping

from ..core.dates import format_date, parse_date
from ..core.errors import UserNotFoundError, ValidationError
from ..core.store import ExerciseRecord, UserRegistry
from ..schemas.exercise import ExerciseRead

logger = logging.getLogger(__name__)


def parse_duration(value: Any) -> int:
    """Convert a duration given as an int or a numeric string to an int.

    Floats are accepted only when they carry no fractional part.
    Booleans are rejected even though they are ints in Python.
    """
    if isinstance(value, bool):
        raise ValidationError("duration must be a number")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise ValidationError("duration must be a number")
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as exc:
            raise ValidationError("duration must be a number") from exc
    raise ValidationError("duration must be a number")


class ExerciseService:
    """Append exercises to user logs."""

    @classmethod
    async def add_exercise(
        cls,
        registry: UserRegistry,
        user_id: str,
        payload: Mapping[str, Any],
        today: Callable[[], date] = date.today,
    ) -> ExerciseRead:
        """Validate ``payload`` and append it to the log of ``user_id``.

        ``today`` supplies the date used when ``payload`` has no
        ``date``.  Raises ``UserNotFoundError``, ``ValidationError`` or
        ``InvalidDateError``.
        """
        user = registry.get_user(user_id)
        if user is None:
            logger.info("Exercise submitted for unknown user %s", user_id)
            raise UserNotFoundError()

        description = payload.get("description")
        duration = payload.get("duration")
        if description is None or description == "" or duration is None or duration == "":
            raise ValidationError("description and duration are required")
        if not isinstance(description, str):
            raise ValidationError("description must be a string")
        minutes = parse_duration(duration)

        raw_date = payload.get("date")
        if raw_date is None or raw_date == "":
            when = today()
        else:
            when = parse_date(raw_date)

        exercise = ExerciseRecord(description=description, duration=minutes, date=when)
        registry.add_exercise(user.id, exercise)
        logger.info("Logged %d min '%s' for user %s on %s", minutes, description, user.id, when.isoformat())
        return ExerciseRead(
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
            id=user.id,
        )
