"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one area; ``router.py`` in the
parent package aggregates them.
"""
