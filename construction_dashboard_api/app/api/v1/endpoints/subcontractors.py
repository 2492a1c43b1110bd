"""
Subcontractor endpoints for API v1.

Plain CRUD plus a free-text search over name, contact person and
specialties.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services, http_error
from construction_dashboard_api.app.core.errors import DashboardError
from construction_dashboard_api.app.filters.resources import filter_subcontractors
from construction_dashboard_api.app.schemas.resource import (
    SubcontractorCreate,
    SubcontractorRead,
    SubcontractorUpdate,
)
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[SubcontractorRead])
async def list_subcontractors(
    search: Optional[str] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> List[SubcontractorRead]:
    return filter_subcontractors(await services.subcontractors.get_all(), search)


@router.post("/", response_model=SubcontractorRead, status_code=status.HTTP_201_CREATED)
async def create_subcontractor(
    item: SubcontractorCreate,
    services: DashboardServices = Depends(get_services),
) -> SubcontractorRead:
    try:
        return await services.subcontractors.create(item)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{subcontractor_id}", response_model=SubcontractorRead)
async def get_subcontractor(
    subcontractor_id: int,
    services: DashboardServices = Depends(get_services),
) -> SubcontractorRead:
    try:
        return await services.subcontractors.get_by_id(subcontractor_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.put("/{subcontractor_id}", response_model=SubcontractorRead)
async def update_subcontractor(
    subcontractor_id: int,
    updates: SubcontractorUpdate,
    services: DashboardServices = Depends(get_services),
) -> SubcontractorRead:
    try:
        return await services.subcontractors.update(subcontractor_id, updates)
    except DashboardError as e:
        raise http_error(e) from e


@router.delete("/{subcontractor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subcontractor(
    subcontractor_id: int,
    services: DashboardServices = Depends(get_services),
) -> None:
    try:
        await services.subcontractors.delete(subcontractor_id)
    except DashboardError as e:
        raise http_error(e) from e
    return None
