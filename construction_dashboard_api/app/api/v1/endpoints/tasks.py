"""
Task endpoints for API v1.

CRUD routes for tasks, the filter lookups (assignees and phases found
on existing tasks) and the due-date urgency of a single task.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services, http_error
from construction_dashboard_api.app.core.errors import DashboardError
from construction_dashboard_api.app.filters.tasks import classify_due_date, filter_tasks
from construction_dashboard_api.app.schemas.task import (
    DueDateStatus,
    NamedRef,
    TaskCreate,
    TaskFilterCriteria,
    TaskRead,
    TaskUpdate,
)
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[TaskRead])
async def list_tasks(
    search: Optional[str] = Query(None, description="Substring of the task name or description"),
    status_filter: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None),
    assignee_id: Optional[int] = Query(None),
    phase_id: Optional[int] = Query(None),
    project_id: Optional[int] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> List[TaskRead]:
    """List tasks, optionally for one project, filtered by the given criteria.

    All filters are optional and combine with AND.  ``status`` and
    ``priority`` must match exactly.
    """
    try:
        if project_id is not None:
            tasks = await services.tasks.get_by_project_id(project_id)
        else:
            tasks = await services.tasks.get_all()
    except DashboardError as e:
        raise http_error(e) from e
    criteria = TaskFilterCriteria(
        search=search,
        status=status_filter,
        priority=priority,
        assignee_id=assignee_id,
        phase_id=phase_id,
    )
    return filter_tasks(tasks, criteria)


@router.get("/assignees", response_model=List[NamedRef])
async def list_assignees(services: DashboardServices = Depends(get_services)) -> List[NamedRef]:
    """Distinct assignees referenced by tasks, sorted by name."""
    return await services.tasks.get_assignees()


@router.get("/phases", response_model=List[NamedRef])
async def list_phases(services: DashboardServices = Depends(get_services)) -> List[NamedRef]:
    """Distinct phases referenced by tasks, sorted by name."""
    return await services.tasks.get_phases()


@router.post("/", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(task: TaskCreate, services: DashboardServices = Depends(get_services)) -> TaskRead:
    try:
        return await services.tasks.create(task)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(task_id: int, services: DashboardServices = Depends(get_services)) -> TaskRead:
    try:
        return await services.tasks.get_by_id(task_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{task_id}/due-status", response_model=DueDateStatus)
async def get_task_due_status(task_id: int, services: DashboardServices = Depends(get_services)) -> DueDateStatus:
    """How urgent the task's due date is right now."""
    try:
        task = await services.tasks.get_by_id(task_id)
    except DashboardError as e:
        raise http_error(e) from e
    return classify_due_date(task)


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: int,
    updates: TaskUpdate,
    services: DashboardServices = Depends(get_services),
) -> TaskRead:
    """Partially update a task.

    Moving a task into ``Completed`` stamps ``completedDate``; moving it
    out clears it.
    """
    try:
        return await services.tasks.update(task_id, updates)
    except DashboardError as e:
        raise http_error(e) from e


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, services: DashboardServices = Depends(get_services)) -> None:
    try:
        await services.tasks.delete(task_id)
    except DashboardError as e:
        raise http_error(e) from e
    return None
