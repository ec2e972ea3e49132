"""
Error types raised by the service layer.

Two tiers exist.  ``ValidationError`` means the client sent missing or
malformed input and is answered with HTTP 400.  ``LenientError``
subclasses (unknown user, unparseable exercise date) are answered with
HTTP 200 and an ``error`` field in the body; existing clients of this
API rely on that contract.  Both render as ``{"error": message}``.
"""


class ExerciseTrackerError(Exception):
    """Base class for errors reported to API clients."""

    message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(ExerciseTrackerError):
    """Required input is missing or cannot be converted."""

    message = "Invalid input"


class LenientError(ExerciseTrackerError):
    """Failure reported in a normal‑status JSON body."""


class UserNotFoundError(LenientError, LookupError):
    message = "User not found"


class InvalidDateError(LenientError, ValueError):
    message = "Invalid Date"
