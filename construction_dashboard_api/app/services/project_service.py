"""
Service for construction projects.

Projects are listed newest first by creation time.  ``createdAt`` is
stamped by the service on creation and cannot be changed afterwards.
"""

from __future__ import annotations

from typing import Any, Dict, List

from construction_dashboard_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from construction_dashboard_api.app.services.base import CrudService


class ProjectService(CrudService[ProjectRead]):
    """CRUD operations on ``EntityStore.projects``."""

    entity = "Project"
    collection_name = "projects"
    read_model = ProjectRead
    create_model = ProjectCreate
    update_model = ProjectUpdate

    delays = {
        "get_all": 0.3,
        "get_by_id": 0.2,
        "create": 0.5,
        "update": 0.4,
        "delete": 0.3,
    }

    def prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values["created_at"] = self.clock()
        return values

    def ordered(self, records: List[ProjectRead]) -> List[ProjectRead]:
        return sorted(records, key=lambda p: p.created_at, reverse=True)
