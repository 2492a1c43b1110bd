"""
Pydantic models for project tasks.

A task belongs to a project and to a construction phase, and is
assigned to one team member.  Phase and assignee are stored as
denormalized pairs: the identifier plus a cached display name.  The
task service keeps the names in sync with the store's directory, so
callers normally send only ``phaseId`` and ``assigneeId``.
"""

from datetime import date, datetime
from typing import Dict, List, Literal, Optional

from pydantic import Field, field_validator

from construction_dashboard_api.app.schemas.base import CamelModel, ensure_utc


TaskStatus = Literal["Not Started", "In Progress", "Completed"]
TaskPriority = Literal["High", "Medium", "Low"]
DueDateKind = Literal["completed", "overdue", "due-soon", "normal"]


class TaskBase(CamelModel):
    project_id: int = Field(..., gt=0)
    phase_id: int = Field(..., gt=0)
    phase_name: Optional[str] = None
    name: str = Field(..., min_length=1, examples=["Pour footings"])
    description: Optional[str] = None
    due_date: date
    priority: TaskPriority = "Medium"
    status: TaskStatus = "Not Started"
    assignee_id: int = Field(..., gt=0)
    assignee_name: Optional[str] = None
    estimated_duration: Optional[int] = Field(None, gt=0, description="Estimated duration in days")


class TaskCreate(TaskBase):
    """Schema for creating a task."""
    pass


class TaskUpdate(CamelModel):
    """Schema for updating a task.

    All fields are optional; the identifier cannot be changed.
    """

    project_id: Optional[int] = Field(None, gt=0)
    phase_id: Optional[int] = Field(None, gt=0)
    phase_name: Optional[str] = None
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    assignee_id: Optional[int] = Field(None, gt=0)
    assignee_name: Optional[str] = None
    estimated_duration: Optional[int] = Field(None, gt=0)


class TaskRead(TaskBase):
    """A stored task."""

    id: int = Field(..., alias="Id", gt=0)
    phase_name: str
    assignee_name: str
    completed_date: Optional[datetime] = None
    created_at: datetime

    @field_validator("completed_date", "created_at")
    @classmethod
    def assume_utc(cls, v):
        return ensure_utc(v)


class TaskFilterCriteria(CamelModel):
    """Criteria for narrowing a task list.

    Every field is optional and an empty value imposes no constraint.
    Status and priority are compared exactly, case included.
    """

    search: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    assignee_id: Optional[int] = None
    phase_id: Optional[int] = None


class NamedRef(CamelModel):
    """An ``{id, name}`` pair used for phases and assignees."""

    id: int
    name: str


class TaskPhaseGroup(CamelModel):
    """Tasks of one phase plus their completion figures."""

    phase_name: str
    tasks: List[TaskRead]
    completed: int
    total: int
    completion_percentage: int


class DueDateStatus(CamelModel):
    """Display urgency of a task's due date."""

    kind: DueDateKind
    text: str
    days: Optional[int] = None


GroupedTasks = Dict[str, TaskPhaseGroup]
