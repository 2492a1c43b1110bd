"""
In-memory entity store.

The ``EntityStore`` owns one list per entity type plus the reference
directory (phases and team members) used to fill denormalized task
names.  A store is built explicitly, either empty, from Python data or
from a directory of JSON fixtures, and handed to the services that
operate on it.  There is no module-level instance.

Fixture layout (all files optional)::

    projects.json   [ {"Id": 1, "name": ..., "createdAt": ...}, ... ]
    tasks.json      [ {"Id": 1, "projectId": 1, "phaseId": 1, ...}, ... ]
    resources.json  {"materials": [...], "equipment": [...], "subcontractors": [...]}
    directory.json  {"phases": [{"id": 1, "name": "Foundation"}], "assignees": [...]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from pydantic import BaseModel

from construction_dashboard_api.app.schemas.project import ProjectRead
from construction_dashboard_api.app.schemas.resource import (
    EquipmentRead,
    MaterialRead,
    MaterialRequestRead,
    SubcontractorRead,
)
from construction_dashboard_api.app.schemas.task import TaskRead


logger = logging.getLogger(__name__)


def _load_records(model: Type[BaseModel], rows: Optional[Iterable[Any]], label: str) -> List[Any]:
    records = [row if isinstance(row, model) else model.model_validate(row) for row in rows or []]
    seen: set[int] = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"Duplicate Id {record.id} in {label} seed data")
        seen.add(record.id)
    # Never share objects with the caller's seed data.
    return [record.model_copy(deep=True) for record in records]


def _load_directory(rows: Optional[Iterable[Mapping[str, Any]]]) -> Dict[int, str]:
    return {int(row["id"]): str(row["name"]) for row in rows or []}


class EntityStore:
    """Holds every collection the dashboard services operate on."""

    def __init__(
        self,
        *,
        projects: Optional[Iterable[Any]] = None,
        tasks: Optional[Iterable[Any]] = None,
        materials: Optional[Iterable[Any]] = None,
        equipment: Optional[Iterable[Any]] = None,
        subcontractors: Optional[Iterable[Any]] = None,
        phases: Optional[Iterable[Mapping[str, Any]]] = None,
        assignees: Optional[Iterable[Mapping[str, Any]]] = None,
    ) -> None:
        self.projects: List[ProjectRead] = _load_records(ProjectRead, projects, "projects")
        self.tasks: List[TaskRead] = _load_records(TaskRead, tasks, "tasks")
        self.materials: List[MaterialRead] = _load_records(MaterialRead, materials, "materials")
        self.equipment: List[EquipmentRead] = _load_records(EquipmentRead, equipment, "equipment")
        self.subcontractors: List[SubcontractorRead] = _load_records(
            SubcontractorRead, subcontractors, "subcontractors"
        )
        self.material_requests: List[MaterialRequestRead] = []
        # Directory used to keep phaseName / assigneeName in sync with
        # their identifiers.  Names found on seeded tasks fill any gaps.
        self.phases: Dict[int, str] = _load_directory(phases)
        self.assignees: Dict[int, str] = _load_directory(assignees)
        for task in self.tasks:
            self.phases.setdefault(task.phase_id, task.phase_name)
            self.assignees.setdefault(task.assignee_id, task.assignee_name)

    def collection(self, name: str) -> List[Any]:
        """Return the live list for ``name`` (e.g. ``"projects"``)."""
        if name not in {"projects", "tasks", "materials", "equipment", "subcontractors"}:
            raise KeyError(f"Unknown collection {name!r}")
        return getattr(self, name)

    def counts(self) -> Dict[str, int]:
        return {
            "projects": len(self.projects),
            "tasks": len(self.tasks),
            "materials": len(self.materials),
            "equipment": len(self.equipment),
            "subcontractors": len(self.subcontractors),
        }

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------
    @classmethod
    def from_seed_dir(cls, seed_dir: str | Path) -> "EntityStore":
        """Build a store from the JSON fixtures found in ``seed_dir``.

        Missing files yield empty collections.  Malformed records raise
        ``pydantic.ValidationError`` so that bad fixtures fail at start
        up rather than on first use.
        """
        base = Path(seed_dir)

        def read(filename: str, default: Any) -> Any:
            path = base / filename
            if not path.exists():
                logger.warning("Seed file %s not found; starting with no data", path)
                return default
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)

        resources = read("resources.json", {})
        directory = read("directory.json", {})
        store = cls(
            projects=read("projects.json", []),
            tasks=read("tasks.json", []),
            materials=resources.get("materials", []),
            equipment=resources.get("equipment", []),
            subcontractors=resources.get("subcontractors", []),
            phases=directory.get("phases", []),
            assignees=directory.get("assignees", []),
        )
        logger.info("Loaded seed data from %s: %s", base, store.counts())
        return store
