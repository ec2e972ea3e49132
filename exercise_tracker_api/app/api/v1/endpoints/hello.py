"""
Greeting endpoint, used as a liveness check.
"""

from fastapi import APIRouter

from exercise_tracker_api.app.schemas.common import Greeting

router = APIRouter()


@router.get("/hello", response_model=Greeting)
async def hello() -> Greeting:
    return Greeting(greeting="hello API")
