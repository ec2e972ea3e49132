"""Entry point for the exercise tracker service.

Launches the FastAPI application under Uvicorn.  Host and port come
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``3000``); see ``exercise_tracker_api/app/core/config.py``
for the other supported variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    # ``log_config=None`` keeps the handlers installed by ``setup_logging``.
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Your app is listening on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
