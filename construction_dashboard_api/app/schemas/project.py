"""
Pydantic models for construction projects.

``ProjectBase`` holds the editable fields; ``ProjectCreate`` is the
request body for new projects, ``ProjectUpdate`` the partial body for
updates (every field optional, no identifier) and ``ProjectRead`` the
stored record including ``Id`` and ``createdAt``.
"""

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import Field, field_validator

from construction_dashboard_api.app.schemas.base import CamelModel, ensure_utc


ProjectStatus = Literal["Planning", "In Progress", "On Hold", "Completed"]
PROJECT_STATUSES = ("Planning", "In Progress", "On Hold", "Completed")


class ProjectBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Riverside Office Tower"])
    location: str = Field(..., examples=["Portland, OR"])
    client_name: str = Field(..., examples=["Cascade Holdings"])
    status: ProjectStatus = "Planning"
    start_date: date
    end_date: date
    total_budget: float = Field(0, ge=0)
    spent_budget: float = Field(0, ge=0)
    progress: int = Field(0, ge=0, le=100)


class ProjectCreate(ProjectBase):
    """Schema for creating a project.

    The end date is not checked against the start date here; that rule
    belongs to the form that collects the data.
    """
    pass


class ProjectUpdate(CamelModel):
    """Schema for updating a project.

    All fields are optional; only fields present in the payload are
    merged onto the stored record.
    """

    name: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = None
    client_name: Optional[str] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    total_budget: Optional[float] = Field(None, ge=0)
    spent_budget: Optional[float] = Field(None, ge=0)
    progress: Optional[int] = Field(None, ge=0, le=100)


class ProjectRead(ProjectBase):
    """A stored project."""

    id: int = Field(..., alias="Id", gt=0)
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, v):
        return ensure_utc(v)


class ProjectStats(CamelModel):
    """Portfolio totals shown on the dashboard header."""

    total: int
    active: int
    completed: int
    on_hold: int
    total_budget: float
    total_spent: float


ProjectSort = Literal["newest", "oldest", "name", "deadline", "budget"]


class ProjectFilterCriteria(CamelModel):
    """Criteria for the project list.  ``status="All"`` disables the status filter."""

    status: str = "All"
    search: Optional[str] = None
    sort_by: ProjectSort = "newest"
