"""
Request dependencies shared by the endpoint modules.

The registry and the clock live on ``app.state`` (see
``main.create_app``); these helpers fetch them per request.
``read_payload`` accepts both JSON and HTML form bodies and returns a
plain mapping that the services validate.
"""

import json
from datetime import date
from typing import Any, Callable, Dict

from fastapi import Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from ..core.errors import ValidationError
from ..core.store import UserRegistry

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_registry(request: Request) -> UserRegistry:
    return request.app.state.registry


def get_clock(request: Request) -> Callable[[], date]:
    return request.app.state.today


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict.

    JSON bodies must decode to an object and form bodies must parse;
    anything else raises ``ValidationError``.  Form bodies keep their
    text fields and drop uploaded files.  A request without a recognised body yields an
    empty dict so the services report the missing fields.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise ValidationError("Malformed JSON body") from exc
        if not isinstance(data, dict):
            raise ValidationError("JSON body must be an object")
        return data
    if content_type.startswith(FORM_CONTENT_TYPES):
        try:
            form = await request.form()
        except (StarletteHTTPException, MultiPartException) as exc:
            raise ValidationError("Malformed form body") from exc
        return {key: value for key, value in form.items() if isinstance(value, str)}
    return {}
