# tests/test_services.py
from __future__ import annotations

import asyncio
from datetime import date

import pytest

from construction_dashboard_api.app.core.errors import InvalidArgumentError, NotFoundError
from construction_dashboard_api.app.core.store import EntityStore
from construction_dashboard_api.app.schemas.project import ProjectCreate, ProjectUpdate
from construction_dashboard_api.app.schemas.resource import MaterialCreate
from construction_dashboard_api.app.schemas.task import TaskCreate, TaskUpdate
from construction_dashboard_api.app.services.base import coerce_id, next_id
from construction_dashboard_api.app.services.registry import build_services

from conftest import FIXED_NOW


def _project(**overrides) -> ProjectCreate:
    values = {
        "name": "Cedar Park Library",
        "location": "Eugene, OR",
        "client_name": "City of Eugene",
        "start_date": date(2025, 1, 6),
        "end_date": date(2025, 12, 19),
        "total_budget": 2_500_000,
    }
    values.update(overrides)
    return ProjectCreate(**values)


def _task(**overrides) -> TaskCreate:
    values = {
        "project_id": 1,
        "phase_id": 2,
        "name": "Install roof deck",
        "due_date": date(2025, 2, 14),
        "assignee_id": 1,
    }
    values.update(overrides)
    return TaskCreate(**values)


# --- Identifier helpers ----------------------------------------------------

@pytest.mark.parametrize("value,expected", [(3, 3), ("12", 12), (" 7 ", 7), (4.0, 4)])
def test_coerce_id_accepts_positive_integers(value, expected):
    assert coerce_id(value) == expected


@pytest.mark.parametrize("value", [0, -1, "abc", "", "1.5", True, 1.5, None])
def test_coerce_id_rejects_everything_else(value):
    with pytest.raises(InvalidArgumentError):
        coerce_id(value, "Task")


def test_next_id_of_empty_collection_is_one():
    assert next_id([]) == 1


# --- Reads -----------------------------------------------------------------

def test_get_all_returns_independent_copies(services, store):
    materials = asyncio.run(services.materials.get_all())

    assert materials == store.materials
    assert all(copy is not original for copy, original in zip(materials, store.materials))

    materials[0].name = "Changed"
    materials[0].quantity_in_stock = 0
    assert store.materials[0].name == "Portland Cement Type I/II"
    assert store.materials[0].quantity_in_stock == 420


def test_get_all_copies_nested_lists(services, store):
    subcontractors = asyncio.run(services.subcontractors.get_all())
    subcontractors[0].specialties.append("Solar")
    assert "Solar" not in store.subcontractors[0].specialties


def test_projects_are_listed_newest_first(services):
    projects = asyncio.run(services.projects.get_all())
    assert [p.id for p in projects] == [2, 5, 1, 4, 3]


def test_get_by_id_accepts_digit_strings(services):
    task = asyncio.run(services.tasks.get_by_id("3"))
    assert task.name == "Erect steel frame levels 1-6"


def test_get_by_id_missing_raises_not_found(services):
    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(services.equipment.get_by_id(99))
    assert str(excinfo.value) == "Equipment with ID 99 not found"


def test_get_by_id_invalid_raises_invalid_argument(services):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.projects.get_by_id(0))


# --- Create ----------------------------------------------------------------

def test_create_assigns_max_plus_one_and_stamps_created_at(services, store):
    project = asyncio.run(services.projects.create(_project()))

    assert project.id == 6
    assert project.created_at == FIXED_NOW
    assert project.status == "Planning"
    assert store.projects[-1].id == 6
    assert store.projects[-1] is not project


def test_create_uses_max_id_not_count(services, store):
    asyncio.run(services.materials.delete(3))
    material = asyncio.run(services.materials.create({"name": "Anchor Bolts", "unit": "piece"}))
    assert material.id == 9


def test_create_into_empty_collection_yields_id_one():
    services = build_services(EntityStore(), latency_scale=0)
    material = asyncio.run(services.materials.create(MaterialCreate(name="Rebar")))
    assert material.id == 1


def test_create_ignores_caller_supplied_id(services):
    material = asyncio.run(services.materials.create({"Id": 1, "name": "Gravel", "unit": "ton"}))
    assert material.id == 9


def test_concurrent_creates_get_distinct_ids(store):
    services = build_services(store, latency_scale=0.01)

    async def create_two():
        return await asyncio.gather(
            services.projects.create(_project(name="East Wing")),
            services.projects.create(_project(name="West Wing")),
        )

    first, second = asyncio.run(create_two())
    assert {first.id, second.id} == {6, 7}
    assert len(store.projects) == 7


def test_invalid_create_leaves_collection_unchanged(services, store):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.projects.create({"name": "", "location": "x"}))
    assert len(store.projects) == 5
    assert services.notifications.recent(1)[0].success is False


def test_create_rejects_missing_payload(services, store):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.projects.create(None))
    assert len(store.projects) == 5
    note = services.notifications.recent(1)[0]
    assert note.success is False
    assert note.action == "create"


def test_create_reports_success(services):
    asyncio.run(services.projects.create(_project()))
    note = services.notifications.recent(1)[0]
    assert note.success is True
    assert note.message == 'Project "Cedar Park Library" created successfully'
    assert note.action == "create"
    assert note.entity == "projects"


# --- Update ----------------------------------------------------------------

def test_update_merges_only_given_fields(services):
    project = asyncio.run(services.projects.update(1, ProjectUpdate(progress=55)))
    assert project.progress == 55
    assert project.name == "Riverside Office Tower"
    assert project.spent_budget == 5320000


def test_update_keeps_identifier(services, store):
    project = asyncio.run(services.projects.update(1, {"Id": 99, "name": "Riverside Tower"}))
    assert project.id == 1
    assert [p.id for p in store.projects] == [1, 2, 3, 4, 5]


def test_update_missing_raises_not_found(services):
    with pytest.raises(NotFoundError):
        asyncio.run(services.subcontractors.update(42, {"rating": 5}))


def test_invalid_update_is_rejected_before_mutation(services, store):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.projects.update(1, {"progress": 150}))
    assert store.projects[0].progress == 42


def test_task_completion_sets_and_clears_completed_date(services):
    task = asyncio.run(services.tasks.update(4, TaskUpdate(status="Completed")))
    assert task.completed_date == FIXED_NOW

    task = asyncio.run(services.tasks.update(4, TaskUpdate(status="In Progress")))
    assert task.completed_date is None


def test_task_update_without_status_keeps_completed_date(services, store):
    original = store.tasks[0].completed_date
    task = asyncio.run(services.tasks.update(1, {"priority": "Low"}))
    assert task.completed_date == original


def test_completing_an_already_completed_task_keeps_its_date(services, store):
    original = store.tasks[0].completed_date
    task = asyncio.run(services.tasks.update(1, {"status": "Completed"}))
    assert task.completed_date == original


# --- Denormalized names ----------------------------------------------------

def test_create_task_fills_names_from_directory(services):
    task = asyncio.run(services.tasks.create(_task(phase_name="Wrong", assignee_id=2)))
    assert task.phase_name == "Structure"
    assert task.assignee_name == "Sarah Chen"
    assert task.created_at == FIXED_NOW
    assert task.completed_date is None


def test_create_completed_task_stamps_completed_date(services):
    task = asyncio.run(services.tasks.create(_task(status="Completed")))
    assert task.completed_date == FIXED_NOW


def test_unknown_phase_requires_a_name(services, store):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.tasks.create(_task(phase_id=42)))
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.tasks.create(_task(phase_id=42, phase_name="   ")))
    assert len(store.tasks) == 16

    task = asyncio.run(services.tasks.create(_task(phase_id=42, phase_name="Landscaping")))
    assert task.phase_name == "Landscaping"


def test_update_assignee_resyncs_name(services):
    task = asyncio.run(services.tasks.update(7, {"assigneeId": 5}))
    assert task.assignee_id == 5
    assert task.assignee_name == "David Kim"


def test_update_name_alone_cannot_break_pair(services):
    task = asyncio.run(services.tasks.update(7, {"phaseName": "Roofing"}))
    assert task.phase_name == "Interior"


# --- Delete ----------------------------------------------------------------

def test_delete_returns_removed_record(services, store):
    removed = asyncio.run(services.equipment.delete(2))
    assert removed.name == "Concrete Mixer Truck"
    assert [e.id for e in store.equipment] == [1, 3, 4, 5]


def test_delete_missing_raises_and_keeps_size(services, store):
    with pytest.raises(NotFoundError):
        asyncio.run(services.tasks.delete(99))
    assert len(store.tasks) == 16
    note = services.notifications.recent(1)[0]
    assert note.success is False
    assert note.message == "Failed to delete task: Task with ID 99 not found"


# --- Task lookups ----------------------------------------------------------

def test_get_by_project_id(services):
    tasks = asyncio.run(services.tasks.get_by_project_id(1))
    assert [t.id for t in tasks] == [1, 2, 3, 4, 5, 6, 7]


def test_get_assignees_sorted_by_name(services):
    assignees = asyncio.run(services.tasks.get_assignees())
    assert [a.name for a in assignees] == [
        "David Kim",
        "Emily Davis",
        "John Martinez",
        "Lisa Thompson",
        "Mike Rodriguez",
        "Sarah Chen",
    ]


def test_get_phases_sorted_by_name(services):
    phases = asyncio.run(services.tasks.get_phases())
    assert [p.name for p in phases][:3] == ["Final", "Foundation", "Interior"]
    assert {p.id for p in phases} == set(range(1, 8))


# --- Material requests -----------------------------------------------------

def test_request_material_increments_ordered_quantity(services, store):
    request = asyncio.run(services.materials.request_material(2, 50, notes="Level 8 deck", urgency="Urgent"))

    material = store.materials[1]
    assert material.quantity_ordered == 50
    assert material.last_ordered == FIXED_NOW
    assert material.quantity_in_stock == 45
    assert material.status == "Critical"

    assert request.id == 1
    assert request.material_id == 2
    assert request.urgency == "Urgent"
    assert asyncio.run(services.materials.list_requests(2)) == [request]
    assert asyncio.run(services.materials.list_requests(1)) == []


def test_request_material_adds_to_existing_order(services, store):
    asyncio.run(services.materials.request_material(3, 300))
    assert store.materials[2].quantity_ordered == 1500


@pytest.mark.parametrize("quantity", [0, -5, True, 2.5, "3", None])
def test_request_material_rejects_bad_quantities(services, store, quantity):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.materials.request_material(2, quantity))
    assert store.materials[1].quantity_ordered == 0
    assert store.material_requests == []


def test_request_unknown_material(services):
    with pytest.raises(NotFoundError):
        asyncio.run(services.materials.request_material(99, 5))
    assert services.notifications.recent(1)[0].action == "request"


def test_request_rejects_unknown_urgency(services, store):
    ordered = store.materials[1].quantity_ordered
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.materials.request_material(2, 5, urgency="Whenever"))
    note = services.notifications.recent(1)[0]
    assert note.success is False
    assert note.action == "request"
    assert store.materials[1].quantity_ordered == ordered
    assert store.material_requests == []


def test_request_rejects_non_text_notes(services, store):
    with pytest.raises(InvalidArgumentError):
        asyncio.run(services.materials.request_material(2, 5, notes=42))
    assert store.material_requests == []


# --- Store -----------------------------------------------------------------

def test_store_rejects_duplicate_ids():
    rows = [{"Id": 1, "name": "A"}, {"Id": 1, "name": "B"}]
    with pytest.raises(ValueError):
        EntityStore(materials=rows)


def test_store_from_missing_dir_is_empty(tmp_path):
    store = EntityStore.from_seed_dir(tmp_path / "nothing-here")
    assert store.counts() == {
        "projects": 0,
        "tasks": 0,
        "materials": 0,
        "equipment": 0,
        "subcontractors": 0,
    }


def test_store_does_not_share_seed_objects(make_task):
    task = make_task()
    store = EntityStore(tasks=[task])
    assert store.tasks[0] == task
    assert store.tasks[0] is not task
    assert store.phases == {1: "Foundation"}
