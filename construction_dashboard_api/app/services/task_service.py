"""
Service for project tasks.

Besides the common CRUD contract this service maintains two pieces of
derived state on every write:

* ``completedDate`` is set when a task moves into ``Completed`` and
  cleared when it moves out of it.  Updates that do not touch
  ``status`` leave it alone.
* ``phaseName`` and ``assigneeName`` mirror ``phaseId`` and
  ``assigneeId``.  Names come from the store's directory (or from
  another task already using the identifier); an unknown identifier is
  accepted only together with an explicit name.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from construction_dashboard_api.app.core.errors import InvalidArgumentError
from construction_dashboard_api.app.schemas.task import NamedRef, TaskCreate, TaskRead, TaskUpdate
from construction_dashboard_api.app.services.base import CrudService, coerce_id


COMPLETED = "Completed"


class TaskService(CrudService[TaskRead]):
    """CRUD operations on ``EntityStore.tasks``."""

    entity = "Task"
    collection_name = "tasks"
    read_model = TaskRead
    create_model = TaskCreate
    update_model = TaskUpdate

    delays = {
        "get_all": 0.1,
        "get_by_id": 0.1,
        "create": 0.2,
        "update": 0.2,
        "delete": 0.15,
        "lookup": 0.1,
    }

    # ------------------------------------------------------------------
    # Denormalized names
    # ------------------------------------------------------------------
    def _known_name(self, directory: Dict[int, str], id_attr: str, name_attr: str, ref_id: int) -> Optional[str]:
        if ref_id in directory:
            return directory[ref_id]
        for task in self.records:
            if getattr(task, id_attr) == ref_id:
                return getattr(task, name_attr)
        return None

    def _sync_name(
        self,
        values: Dict[str, Any],
        id_attr: str,
        name_attr: str,
        directory: Dict[int, str],
        label: str,
        current_id: Optional[int] = None,
    ) -> None:
        ref_id = values.get(id_attr, current_id)
        if ref_id is None:
            return
        if id_attr not in values and not values.get(name_attr):
            return
        known = self._known_name(directory, id_attr, name_attr, ref_id)
        name = (values.get(name_attr) or "").strip()
        if known is not None:
            values[name_attr] = known
        elif name:
            values[name_attr] = name
        else:
            raise InvalidArgumentError(f"Unknown {label} ID {ref_id}; a {label} name is required")

    def _sync_names(self, values: Dict[str, Any], existing: Optional[TaskRead] = None) -> None:
        self._sync_name(
            values, "phase_id", "phase_name", self.store.phases, "phase",
            current_id=existing.phase_id if existing else None,
        )
        self._sync_name(
            values, "assignee_id", "assignee_name", self.store.assignees, "assignee",
            current_id=existing.assignee_id if existing else None,
        )

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        self._sync_names(values)
        now = self.clock()
        values["completed_date"] = now if values.get("status") == COMPLETED else None
        values["created_at"] = now
        return values

    def prepare_update(self, existing: TaskRead, changes: Dict[str, Any]) -> Dict[str, Any]:
        self._sync_names(changes, existing)
        if "status" in changes:
            if changes["status"] == COMPLETED:
                if existing.status != COMPLETED:
                    changes["completed_date"] = self.clock()
            else:
                changes["completed_date"] = None
        return changes

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    async def get_by_project_id(self, project_id: Any) -> List[TaskRead]:
        """Return the tasks of one project in insertion order."""
        project_id = coerce_id(project_id, "Project")
        await self._simulate_latency("get_all")
        return [task.model_copy(deep=True) for task in self.records if task.project_id == project_id]

    def _unique_refs(self, id_attr: str, name_attr: str) -> List[NamedRef]:
        refs: Dict[int, str] = {}
        for task in self.records:
            refs[getattr(task, id_attr)] = getattr(task, name_attr)
        return sorted((NamedRef(id=k, name=v) for k, v in refs.items()), key=lambda r: r.name.casefold())

    async def get_assignees(self) -> List[NamedRef]:
        """Unique assignees found on tasks, sorted by name."""
        await self._simulate_latency("lookup")
        return self._unique_refs("assignee_id", "assignee_name")

    async def get_phases(self) -> List[NamedRef]:
        """Unique phases found on tasks, sorted by name."""
        await self._simulate_latency("lookup")
        return self._unique_refs("phase_id", "phase_name")
