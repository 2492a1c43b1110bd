"""
Project endpoints for API v1.

CRUD routes for construction projects plus the project list view
(status filter, search and sort), portfolio totals and the task views
shown on a project's detail page.
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query, status

from construction_dashboard_api.app.api.deps import get_services, http_error
from construction_dashboard_api.app.core.errors import DashboardError
from construction_dashboard_api.app.filters.projects import filter_projects, project_stats
from construction_dashboard_api.app.filters.tasks import filter_tasks, group_tasks_by_phase
from construction_dashboard_api.app.schemas.project import (
    ProjectCreate,
    ProjectFilterCriteria,
    ProjectRead,
    ProjectSort,
    ProjectStats,
    ProjectUpdate,
)
from construction_dashboard_api.app.schemas.task import TaskFilterCriteria, TaskPhaseGroup, TaskRead
from construction_dashboard_api.app.services.registry import DashboardServices


router = APIRouter()


@router.get("/", response_model=List[ProjectRead])
async def list_projects(
    status_filter: str = Query("All", alias="status", description="Exact project status or 'All'"),
    search: Optional[str] = Query(None, description="Matches name, location or client"),
    sort_by: ProjectSort = Query("newest"),
    services: DashboardServices = Depends(get_services),
) -> List[ProjectRead]:
    """List projects.

    - **status**: `Planning`, `In Progress`, `On Hold`, `Completed` or `All`.
    - **search**: case-insensitive substring of name, location or client name.
    - **sort_by**: `newest`, `oldest`, `name`, `deadline` or `budget` (high to low).
    """
    projects = await services.projects.get_all()
    criteria = ProjectFilterCriteria(status=status_filter, search=search, sort_by=sort_by)
    return filter_projects(projects, criteria)


@router.get("/stats", response_model=ProjectStats)
async def get_project_stats(services: DashboardServices = Depends(get_services)) -> ProjectStats:
    """Counts by status and budget totals across all projects."""
    return project_stats(await services.projects.get_all())


@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project: ProjectCreate,
    services: DashboardServices = Depends(get_services),
) -> ProjectRead:
    try:
        return await services.projects.create(project)
    except DashboardError as e:
        raise http_error(e) from e


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: int, services: DashboardServices = Depends(get_services)) -> ProjectRead:
    try:
        return await services.projects.get_by_id(project_id)
    except DashboardError as e:
        raise http_error(e) from e


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: int,
    updates: ProjectUpdate,
    services: DashboardServices = Depends(get_services),
) -> ProjectRead:
    """Partially update a project; fields left out of the body are unchanged."""
    try:
        return await services.projects.update(project_id, updates)
    except DashboardError as e:
        raise http_error(e) from e


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, services: DashboardServices = Depends(get_services)) -> None:
    """Delete a project.

    Tasks that reference the project are left in place.
    """
    try:
        await services.projects.delete(project_id)
    except DashboardError as e:
        raise http_error(e) from e
    return None


@router.get("/{project_id}/tasks", response_model=List[TaskRead])
async def list_project_tasks(
    project_id: int,
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None),
    assignee_id: Optional[int] = Query(None),
    phase_id: Optional[int] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> List[TaskRead]:
    """Tasks of one project, narrowed by the task filters."""
    try:
        await services.projects.get_by_id(project_id)
        tasks = await services.tasks.get_by_project_id(project_id)
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


@router.get("/{project_id}/tasks/grouped", response_model=Dict[str, TaskPhaseGroup])
async def group_project_tasks(
    project_id: int,
    search: Optional[str] = Query(None),
    status_filter: Optional[str] = Query(None, alias="status"),
    priority: Optional[str] = Query(None),
    assignee_id: Optional[int] = Query(None),
    phase_id: Optional[int] = Query(None),
    services: DashboardServices = Depends(get_services),
) -> Dict[str, TaskPhaseGroup]:
    """Filtered tasks of one project grouped by phase with completion figures."""
    try:
        await services.projects.get_by_id(project_id)
        tasks = await services.tasks.get_by_project_id(project_id)
    except DashboardError as e:
        raise http_error(e) from e
    criteria = TaskFilterCriteria(
        search=search,
        status=status_filter,
        priority=priority,
        assignee_id=assignee_id,
        phase_id=phase_id,
    )
    return group_tasks_by_phase(filter_tasks(tasks, criteria))
