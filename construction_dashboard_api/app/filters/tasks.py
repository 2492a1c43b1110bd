"""
Task views: filtering, grouping by phase and due-date urgency.
"""

from __future__ import annotations

import math
from collections import OrderedDict
from datetime import date, datetime, timezone
from typing import Any, Iterable, List, Mapping, Optional, Union

from construction_dashboard_api.app.schemas.task import (
    DueDateStatus,
    GroupedTasks,
    TaskFilterCriteria,
    TaskPhaseGroup,
    TaskRead,
)


DUE_SOON_DAYS = 2

Criteria = Union[TaskFilterCriteria, Mapping[str, Any], None]


def _criteria(criteria: Criteria) -> TaskFilterCriteria:
    if criteria is None:
        return TaskFilterCriteria()
    if isinstance(criteria, TaskFilterCriteria):
        return criteria
    return TaskFilterCriteria.model_validate(criteria)


def _matches(task: TaskRead, criteria: TaskFilterCriteria) -> bool:
    search = (criteria.search or "").strip().casefold()
    if search:
        name = (task.name or "").casefold()
        description = (task.description or "").casefold()
        if search not in name and search not in description:
            return False
    if criteria.status and task.status != criteria.status:
        return False
    if criteria.priority and task.priority != criteria.priority:
        return False
    if criteria.assignee_id and task.assignee_id != criteria.assignee_id:
        return False
    if criteria.phase_id and task.phase_id != criteria.phase_id:
        return False
    return True


def filter_tasks(tasks: Iterable[TaskRead], criteria: Criteria = None) -> List[TaskRead]:
    """Return the tasks matching every active criterion, in input order.

    ``criteria`` may be a ``TaskFilterCriteria`` or a plain mapping
    using either camelCase or snake_case keys.
    """
    criteria = _criteria(criteria)
    return [task for task in tasks if _matches(task, criteria)]


def completion_percentage(completed: int, total: int) -> int:
    if total <= 0:
        return 0
    # Half rounds up, matching how the dashboard displays progress.
    return int(math.floor(completed / total * 100 + 0.5))


def group_tasks_by_phase(tasks: Iterable[TaskRead]) -> GroupedTasks:
    """Partition tasks by ``phaseName``.

    Phases appear in the order their first task appears; tasks keep
    their relative order inside each phase.
    """
    buckets: "OrderedDict[str, List[TaskRead]]" = OrderedDict()
    for task in tasks:
        buckets.setdefault(task.phase_name, []).append(task)
    groups: GroupedTasks = {}
    for phase_name, phase_tasks in buckets.items():
        completed = sum(1 for task in phase_tasks if task.status == "Completed")
        total = len(phase_tasks)
        groups[phase_name] = TaskPhaseGroup(
            phase_name=phase_name,
            tasks=phase_tasks,
            completed=completed,
            total=total,
            completion_percentage=completion_percentage(completed, total),
        )
    return groups


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def classify_due_date(task: TaskRead, now: Optional[datetime] = None) -> DueDateStatus:
    """Describe how urgent a task's due date is.

    Day differences are counted in whole calendar days between the due
    date and ``now`` (UTC by default).
    """
    if task.status == "Completed":
        text = "Completed"
        if task.completed_date:
            text = f"Completed {task.completed_date:%b %d}"
        return DueDateStatus(kind="completed", text=text)

    today = _as_date(now or datetime.now(timezone.utc))
    due = _as_date(task.due_date)
    days = (due - today).days

    if days < 0:
        overdue = abs(days)
        plural = "s" if overdue > 1 else ""
        return DueDateStatus(kind="overdue", text=f"{overdue} day{plural} overdue", days=overdue)
    if days <= DUE_SOON_DAYS:
        if days == 0:
            text = "Due today"
        elif days == 1:
            text = "Due tomorrow"
        else:
            text = f"Due in {days} days"
        return DueDateStatus(kind="due-soon", text=text, days=days)
    return DueDateStatus(kind="normal", text=f"{due:%b %d, %Y}", days=days)
