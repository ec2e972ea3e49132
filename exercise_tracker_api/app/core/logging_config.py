"""
Logging configuration for the service.

``setup_logging`` installs a console handler (and optionally a file
handler) on the root logger the first time it is called; later calls
are no‑ops so building several applications in one process, as the
tests do, does not duplicate output.  Uvicorn's own loggers are
pointed at the same handlers so server and application messages share
one format.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name such as ``"DEBUG"`` or ``"info"``.  Unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Optional file to append log records to, in addition to the
        console.

    Returns
    -------
    bool
        ``True`` if handlers were installed, ``False`` if logging had
        already been configured.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
    return True
