"""
Equipment endpoints for API v1.

Plain CRUD plus a free-text search over name, type and status.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services, http_error
from construction_dashboard_api.app.core.errors import DashboardError
from construction_dashboard_api.app.filters.resources import filter_equipment
from construction_dashboard_api.app.schemas.resource import EquipmentCreate, EquipmentRead, EquipmentUpdate
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[EquipmentRead])
async def list_equipment(
    search: Optional[str] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> List[EquipmentRead]:
    return filter_equipment(await services.equipment.get_all(), search)


@router.post("/", response_model=EquipmentRead, status_code=status.HTTP_201_CREATED)
async def create_equipment(
    item: EquipmentCreate,
    services: DashboardServices = Depends(get_services),
) -> EquipmentRead:
    try:
        return await services.equipment.create(item)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{equipment_id}", response_model=EquipmentRead)
async def get_equipment(equipment_id: int, services: DashboardServices = Depends(get_services)) -> EquipmentRead:
    try:
        return await services.equipment.get_by_id(equipment_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.put("/{equipment_id}", response_model=EquipmentRead)
async def update_equipment(
    equipment_id: int,
    updates: EquipmentUpdate,
    services: DashboardServices = Depends(get_services),
) -> EquipmentRead:
    try:
        return await services.equipment.update(equipment_id, updates)
    except DashboardError as e:
        raise http_error(e) from e


@router.delete("/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_equipment(equipment_id: int, services: DashboardServices = Depends(get_services)) -> None:
    try:
        await services.equipment.delete(equipment_id)
    except DashboardError as e:
        raise http_error(e) from e
    return None
