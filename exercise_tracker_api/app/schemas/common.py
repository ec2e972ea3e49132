"""
Shared response models.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body used for both validation (400) and lenient (200) failures."""

    error: str = Field(..., examples=["User not found"])


class Greeting(BaseModel):
    greeting: str = Field(..., examples=["hello API"])
