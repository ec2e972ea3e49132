"""
Main entrypoint for the Exercise Tracker API.

This module assembles the FastAPI application: logging, CORS, error
handlers, the versioned API router and the static home page.  The
``create_app`` function builds a fresh application around its own
``UserRegistry``; a default instance is created at import time as
``app`` so it can be served directly, e.g.::

    uvicorn exercise_tracker_api.app.main:app --reload
"""

import logging
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.errors import LenientError, ValidationError
from .core.logging_config import setup_logging
from .core.store import UserRegistry

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


async def lenient_error_handler(request: Request, exc: LenientError) -> JSONResponse:
    # Reported with a success status; clients read the ``error`` field.
    logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status.HTTP_200_OK, content={"error": exc.message})


def create_app(
    registry: Optional[UserRegistry] = None,
    today: Optional[Callable[[], date]] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    registry : Optional[UserRegistry]
        Store used by the handlers.  A new empty registry is created
        when omitted.
    today : Optional[Callable[[], date]]
        Clock supplying the default exercise date.  Defaults to
        ``date.today``.
    app_settings : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file or None)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)
    app.state.registry = registry if registry is not None else UserRegistry()
    app.state.today = today or date.today

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(LenientError, lenient_error_handler)

    app.include_router(v1_router, prefix="/api")

    views_dir = Path(cfg.views_dir)
    public_dir = views_dir / "public"
    if public_dir.is_dir():
        app.mount("/public", StaticFiles(directory=str(public_dir)), name="public")

    @app.get("/", include_in_schema=False)
    async def index() -> FileResponse:
        index_path = views_dir / "index.html"
        if not index_path.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Home page not found")
        return FileResponse(index_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
