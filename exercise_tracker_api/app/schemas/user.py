"""
Pydantic models for user data.
"""

from pydantic import BaseModel, Field


class UserRead(BaseModel):
    """A user as returned by the API.  The exercise log is never included."""

    username: str = Field(..., examples=["alice"])
    id: str = Field(..., examples=["1"])

    model_config = {
        "from_attributes": True,
    }
