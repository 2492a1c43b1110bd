"""
FastAPI dependencies shared by the endpoint modules.

Services are created once per application in ``create_app`` and kept
on ``app.state.services``; handlers receive them through ``Depends``.
"""

from fastapi import HTTPException, Request, status

from construction_dashboard_api.app.core.errors import DashboardError, InvalidArgumentError, NotFoundError
from construction_dashboard_api.app.services.registry import DashboardServices


def get_services(request: Request) -> DashboardServices:
    return request.app.state.services


def http_error(exc: DashboardError) -> HTTPException:
    """Translate a service error into the matching HTTP error."""
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, InvalidArgumentError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
