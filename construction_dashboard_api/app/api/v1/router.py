"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (projects, tasks, resources
and notifications) under a unified prefix.  When a new domain is
added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    equipment,
    materials,
    notifications,
    projects,
    subcontractors,
    tasks,
)

router = APIRouter()

router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
router.include_router(materials.router, prefix="/materials", tags=["materials"])
router.include_router(equipment.router, prefix="/equipment", tags=["equipment"])
router.include_router(subcontractors.router, prefix="/subcontractors", tags=["subcontractors"])
router.include_router(notifications.router, prefix="/notifications", tags=["notifications"])
