"""
Main entrypoint for the Construction Dashboard API.

This module assembles the FastAPI application, sets up logging, builds
the in-memory store and services and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``::

    uvicorn construction_dashboard_api.app.main:app --reload

Tests and scripts can pass their own ``EntityStore`` (and settings) to
``create_app`` to get an isolated application.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.notifications import NotificationCenter
from .core.store import EntityStore
from .services.registry import build_services


def create_app(store: Optional[EntityStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EntityStore]
        Store the services operate on.  When omitted, one is loaded from
        ``settings.seed_data_dir``.
    settings : Optional[Settings]
        Configuration to use instead of the environment-derived
        module-level settings.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that seed loading can
    # log.
    setup_logging(settings.log_level, settings.log_file)

    if store is None:
        store = EntityStore.from_seed_dir(settings.seed_data_dir)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.services = build_services(
        store,
        NotificationCenter(history=settings.notification_history),
        latency_scale=settings.simulated_latency_scale,
    )

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
