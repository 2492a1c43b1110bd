"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with the bundled seed data and realistic simulated latency
without any setup.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


DEFAULT_SEED_DIR = Path(__file__).resolve().parent.parent / "data"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Construction Dashboard API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Directory holding projects.json, tasks.json, resources.json and
    # directory.json.  Relative paths are resolved against the current
    # working directory.
    seed_data_dir: str = os.getenv("SEED_DATA_DIR", str(DEFAULT_SEED_DIR))

    # Multiplier applied to every simulated service delay.  ``0`` turns
    # the artificial latency off entirely (useful for tests and demos).
    simulated_latency_scale: float = float(os.getenv("SIMULATED_LATENCY_SCALE", "1.0"))

    # Number of notifications kept in memory for ``GET /notifications``.
    notification_history: int = int(os.getenv("NOTIFICATION_HISTORY", "100"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
