"""
Pydantic model for operation notifications.

Every mutating service call produces one notification describing
whether it succeeded.  A dashboard front end would show these as
toasts; the API only records them.
"""

from datetime import datetime
from typing import Literal

from construction_dashboard_api.app.schemas.base import CamelModel


NotificationAction = Literal["create", "update", "delete", "request"]


class Notification(CamelModel):
    success: bool
    message: str
    entity: str
    action: NotificationAction
    created_at: datetime
