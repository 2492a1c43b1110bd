"""
Logging setup for the dashboard service.

``setup_logging`` attaches a console handler, plus a file handler when
``LOG_FILE`` is set, to the root logger.  Modules log through
``logging.getLogger(__name__)``, so service messages show up as
``construction_dashboard_api.app.services.task_service`` and so on.
"""

import logging
from pathlib import Path
from typing import List, Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Per-request access lines are only shown at DEBUG.
QUIET_LOGGERS = ("uvicorn.access",)


def _handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once per process.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"warning"``.  Unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        File to append log records to.  Missing parent directories are
        created.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest, uvicorn or an earlier create_app()).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
