"""
Project list views and portfolio totals.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from construction_dashboard_api.app.schemas.project import ProjectFilterCriteria, ProjectRead, ProjectStats
from construction_dashboard_api.app.filters import text_key


def filter_projects(
    projects: Iterable[ProjectRead],
    criteria: Optional[ProjectFilterCriteria] = None,
) -> List[ProjectRead]:
    criteria = criteria or ProjectFilterCriteria()
    result = list(projects)

    if criteria.status and criteria.status != "All":
        result = [p for p in result if p.status == criteria.status]

    search = (criteria.search or "").strip().casefold()
    if search:
        result = [
            p for p in result
            if search in p.name.casefold()
            or search in p.location.casefold()
            or search in p.client_name.casefold()
        ]

    if criteria.sort_by == "newest":
        result.sort(key=lambda p: p.created_at, reverse=True)
    elif criteria.sort_by == "oldest":
        result.sort(key=lambda p: p.created_at)
    elif criteria.sort_by == "name":
        result.sort(key=lambda p: text_key(p.name))
    elif criteria.sort_by == "deadline":
        result.sort(key=lambda p: p.end_date)
    elif criteria.sort_by == "budget":
        result.sort(key=lambda p: p.total_budget, reverse=True)
    return result


def budget_utilization(project: ProjectRead) -> float:
    """Spent budget as a percentage of the total; 0 for an unbudgeted project."""
    if project.total_budget <= 0:
        return 0.0
    return project.spent_budget / project.total_budget * 100


def project_stats(projects: Iterable[ProjectRead]) -> ProjectStats:
    projects = list(projects)
    return ProjectStats(
        total=len(projects),
        active=sum(1 for p in projects if p.status == "In Progress"),
        completed=sum(1 for p in projects if p.status == "Completed"),
        on_hold=sum(1 for p in projects if p.status == "On Hold"),
        total_budget=sum(p.total_budget for p in projects),
        total_spent=sum(p.spent_budget for p in projects),
    )
