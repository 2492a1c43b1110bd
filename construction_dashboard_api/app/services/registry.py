"""
Wiring of services around a shared store.

``build_services`` creates one instance of every service bound to the
same ``EntityStore`` and ``NotificationCenter``.  The FastAPI app keeps
the result on ``app.state.services``; scripts and tests can build their
own.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from construction_dashboard_api.app.core.notifications import NotificationCenter
from construction_dashboard_api.app.core.store import EntityStore
from construction_dashboard_api.app.services.equipment_service import EquipmentService
from construction_dashboard_api.app.services.material_service import MaterialService
from construction_dashboard_api.app.services.project_service import ProjectService
from construction_dashboard_api.app.services.subcontractor_service import SubcontractorService
from construction_dashboard_api.app.services.task_service import TaskService


@dataclass
class DashboardServices:
    store: EntityStore
    notifications: NotificationCenter
    projects: ProjectService
    tasks: TaskService
    materials: MaterialService
    equipment: EquipmentService
    subcontractors: SubcontractorService


def build_services(
    store: EntityStore,
    notifications: Optional[NotificationCenter] = None,
    latency_scale: float = 1.0,
    clock: Optional[Callable[[], datetime]] = None,
) -> DashboardServices:
    notifications = notifications or NotificationCenter()
    options = {"notifications": notifications, "latency_scale": latency_scale, "clock": clock}
    return DashboardServices(
        store=store,
        notifications=notifications,
        projects=ProjectService(store, **options),
        tasks=TaskService(store, **options),
        materials=MaterialService(store, **options),
        equipment=EquipmentService(store, **options),
        subcontractors=SubcontractorService(store, **options),
    )
