"""Entry point for the construction dashboard API.

Starts the FastAPI application with Uvicorn.  Host, port and the rest
of the configuration come from environment variables read by
``construction_dashboard_api.app.core.config`` (``HOST``, ``PORT``,
``LOG_LEVEL``, ``SIMULATED_LATENCY_SCALE`` ...).

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from construction_dashboard_api.app.core.config import settings
from construction_dashboard_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
