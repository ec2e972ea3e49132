"""
Top‑level package for the Exercise Tracker API.

The HTTP service lives in the ``app`` subpackage and can be imported
as ``exercise_tracker_api.app.main``.  A small ``requests`` based
client for the same API is available in ``exercise_tracker_api.client``.
"""

__all__ = []
