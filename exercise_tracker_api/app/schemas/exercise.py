"""
Pydantic models for exercises and exercise logs.

Dates are rendered as strings of the form ``"Mon Jan 01 1990"`` by the
service layer before the models are built.
"""

from typing import List

from pydantic import BaseModel, Field


class ExerciseRead(BaseModel):
    """Response for a newly logged exercise."""

    username: str = Field(..., examples=["alice"])
    description: str = Field(..., examples=["run"])
    duration: int = Field(..., examples=[30])
    date: str = Field(..., examples=["Mon Jan 01 1990"])
    id: str = Field(..., examples=["1"])


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLog(BaseModel):
    """A user's filtered exercise history.

    ``count`` is the number of entries in ``log`` after filtering and
    truncation, not the size of the full history.
    """

    username: str
    count: int
    id: str
    log: List[LogEntry]
