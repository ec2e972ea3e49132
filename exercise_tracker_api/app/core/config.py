"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via the
environment (or a ``.env`` file loaded by your process manager).
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

# Directory holding the bundled home page.
DEFAULT_VIEWS_DIR = str(Path(__file__).resolve().parent.parent / "views")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Exercise Tracker API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    # ``*`` allows every origin.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Directory containing ``index.html`` served at ``/`` and any static
    # assets served under ``/public``.
    views_dir: str = os.getenv("VIEWS_DIR", DEFAULT_VIEWS_DIR)

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list, ignoring blanks."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
