"""
User endpoints for API v1.

Create and list users, log exercises against a user and read a user's
filtered exercise history.  Request bodies may be JSON or HTML form
data.  Failures are raised as the error types from ``core.errors`` and
rendered by the handlers registered in ``main``: validation failures
become HTTP 400, unknown users and invalid exercise dates become a
200 response carrying an ``error`` field.
"""

from datetime import date
from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from exercise_tracker_api.app.api.deps import get_clock, get_registry, read_payload
from exercise_tracker_api.app.core.store import UserRegistry
from exercise_tracker_api.app.schemas.common import ErrorResponse
from exercise_tracker_api.app.schemas.exercise import ExerciseLog, ExerciseRead
from exercise_tracker_api.app.schemas.user import UserRead
from exercise_tracker_api.app.services.exercise_service import ExerciseService
from exercise_tracker_api.app.services.log_service import LogService
from exercise_tracker_api.app.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=UserRead, responses={400: {"model": ErrorResponse}})
async def create_user(
    payload: Dict[str, Any] = Depends(read_payload),
    registry: UserRegistry = Depends(get_registry),
) -> UserRead:
    """Register a new user from the ``username`` field."""
    return await UserService.create_user(registry, payload)


@router.get("", response_model=List[UserRead])
async def list_users(registry: UserRegistry = Depends(get_registry)) -> List[UserRead]:
    """List every user in creation order."""
    return await UserService.list_users(registry)


@router.post(
    "/{user_id}/exercises",
    response_model=ExerciseRead,
    responses={400: {"model": ErrorResponse}},
)
async def add_exercise(
    user_id: str,
    payload: Dict[str, Any] = Depends(read_payload),
    registry: UserRegistry = Depends(get_registry),
    today: Callable[[], date] = Depends(get_clock),
) -> ExerciseRead:
    """Log an exercise for a user.

    ``description`` and ``duration`` are required; ``date`` is an
    optional ``yyyy-mm-dd`` string and defaults to today.
    """
    return await ExerciseService.add_exercise(registry, user_id, payload, today=today)


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    date_from: Optional[str] = Query(None, alias="from"),
    date_to: Optional[str] = Query(None, alias="to"),
    limit: Optional[str] = Query(None),
    registry: UserRegistry = Depends(get_registry),
) -> ExerciseLog:
    """Return a user's exercise history.

    - **from**, **to**: inclusive ``yyyy-mm-dd`` bounds; invalid values are ignored.
    - **limit**: keep only the first *n* entries; ignored unless a positive integer.
    """
    return await LogService.get_log(registry, user_id, date_from=date_from, date_to=date_to, limit=limit)
