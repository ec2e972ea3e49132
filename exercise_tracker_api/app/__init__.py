"""
Application package initializer.

The service is organised in layers: ``core`` holds settings, logging,
error types, date helpers and the in‑memory store; ``schemas`` holds
the pydantic response models; ``services`` holds the business logic;
``api`` holds the routers.  ``main`` wires them together.
"""

from .main import app, create_app  # noqa: F401
