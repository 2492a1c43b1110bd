"""
Notification endpoints for API v1.

Exposes the recent success/failure messages produced by create,
update, delete and material request operations, newest first.  A
front end polls this to show toasts.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services
from construction_dashboard_api.app.schemas.notification import Notification
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[Notification])
async def list_notifications(
    limit: int = Query(20, ge=1, le=1000),
    services: DashboardServices = Depends(get_services),
) -> List[Notification]:
    return services.notifications.recent(limit)


@router.delete("/", status_code=status.HTTP_204_NO_CONTENT)
async def clear_notifications(services: DashboardServices = Depends(get_services)) -> None:
    services.notifications.clear()
    return None
