"""
Top‑level router for version 1 of the API.

When new endpoint modules are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import hello, users

router = APIRouter()

# ``hello`` defines its own "/hello" path, so it is included without a prefix.
router.include_router(hello.router, tags=["hello"])
router.include_router(users.router, prefix="/users", tags=["users"])
