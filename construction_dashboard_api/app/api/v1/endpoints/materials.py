"""
Material endpoints for API v1.

Besides CRUD, the inventory view supports a stock bucket filter
(``all``, ``low``, ``critical``, ``ordered``), sorting and material
requests.  Requests only raise the ordered quantity; stock on hand is
changed through a regular update once a delivery arrives.
"""

from typing import List, Literal, Optional

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services, http_error
from construction_dashboard_api.app.core.errors import DashboardError
from construction_dashboard_api.app.filters.materials import filter_materials, material_stats
from construction_dashboard_api.app.schemas.resource import (
    MaterialCreate,
    MaterialFilterCriteria,
    MaterialRead,
    MaterialRequestCreate,
    MaterialRequestRead,
    MaterialStats,
    MaterialUpdate,
)
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[MaterialRead])
async def list_materials(
    search: Optional[str] = Query(None, description="Matches name, category or supplier"),
    status_filter: Literal["all", "low", "critical", "ordered"] = Query("all", alias="status"),
    sort_by: Literal["name", "stock", "status", "supplier"] = Query("name"),
    order: Literal["asc", "desc"] = Query("asc"),
    services: DashboardServices = Depends(get_services),
) -> List[MaterialRead]:
    """List materials.

    - **status**: `low` is stock at or below the reorder level,
      `critical` is status Critical or stock at or below half the
      reorder level, `ordered` is status Ordered.
    - **sort_by** / **order**: text fields sort case-insensitively,
      `stock` numerically.
    """
    materials = await services.materials.get_all()
    criteria = MaterialFilterCriteria(search=search, status=status_filter, sort_by=sort_by, order=order)
    return filter_materials(materials, criteria)


@router.get("/stats", response_model=MaterialStats)
async def get_material_stats(services: DashboardServices = Depends(get_services)) -> MaterialStats:
    return material_stats(await services.materials.get_all())


@router.get("/requests", response_model=List[MaterialRequestRead])
async def list_material_requests(
    material_id: Optional[int] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> List[MaterialRequestRead]:
    try:
        return await services.materials.list_requests(material_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.post("/", response_model=MaterialRead, status_code=status.HTTP_201_CREATED)
async def create_material(
    material: MaterialCreate,
    services: DashboardServices = Depends(get_services),
) -> MaterialRead:
    try:
        return await services.materials.create(material)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{material_id}", response_model=MaterialRead)
async def get_material(material_id: int, services: DashboardServices = Depends(get_services)) -> MaterialRead:
    try:
        return await services.materials.get_by_id(material_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.put("/{material_id}", response_model=MaterialRead)
async def update_material(
    material_id: int,
    updates: MaterialUpdate,
    services: DashboardServices = Depends(get_services),
) -> MaterialRead:
    try:
        return await services.materials.update(material_id, updates)
    except DashboardError as e:
        raise http_error(e) from e


@router.delete("/{material_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_material(material_id: int, services: DashboardServices = Depends(get_services)) -> None:
    try:
        await services.materials.delete(material_id)
    except DashboardError as e:
        raise http_error(e) from e
    return None


@router.post(
    "/{material_id}/requests",
    response_model=MaterialRequestRead,
    status_code=status.HTTP_201_CREATED,
)
async def request_material(
    material_id: int,
    request: MaterialRequestCreate,
    services: DashboardServices = Depends(get_services),
) -> MaterialRequestRead:
    """Request more of a material.  ``quantity`` must be a positive integer."""
    try:
        return await services.materials.request_material(
            material_id,
            request.quantity,
            notes=request.notes,
            urgency=request.urgency,
        )
    except DashboardError as e:
        raise http_error(e) from e
