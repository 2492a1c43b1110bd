"""
Notification sink for service operations.

Services report the outcome of every create, update, delete and
material request as a ``(success, message)`` pair.  The
``NotificationCenter`` stamps and stores these in a bounded history and
mirrors them to the log; displaying them is left to the client.
"""

from __future__ import annotations

import logging
from collections import deque
from datetime import datetime, timezone
from typing import Callable, Deque, List, Optional

from construction_dashboard_api.app.schemas.notification import Notification


logger = logging.getLogger(__name__)


class NotificationCenter:
    """Keeps the most recent operation notifications."""

    def __init__(self, history: int = 100, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._items: Deque[Notification] = deque(maxlen=max(history, 1))
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def notify(self, success: bool, message: str, *, entity: str, action: str) -> Notification:
        notification = Notification(
            success=success,
            message=message,
            entity=entity,
            action=action,
            created_at=self._clock(),
        )
        self._items.append(notification)
        if success:
            logger.info(message)
        else:
            logger.warning(message)
        return notification

    def success(self, message: str, *, entity: str, action: str) -> Notification:
        return self.notify(True, message, entity=entity, action=action)

    def failure(self, message: str, *, entity: str, action: str) -> Notification:
        return self.notify(False, message, entity=entity, action=action)

    def recent(self, limit: Optional[int] = None) -> List[Notification]:
        """Return notifications newest first."""
        items = list(reversed(self._items))
        if limit is not None:
            items = items[:limit]
        return [item.model_copy() for item in items]

    def clear(self) -> None:
        self._items.clear()
