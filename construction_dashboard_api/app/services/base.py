"""
Generic CRUD service over an ``EntityStore`` collection.

Every entity service (projects, tasks, materials, equipment,
subcontractors) shares the same contract:

* ``get_all()`` returns deep copies of all records.
* ``get_by_id(id)`` returns a copy of one record or raises
  ``NotFoundError``; identifiers that are not positive integers raise
  ``InvalidArgumentError``.
* ``create(data)`` assigns ``Id = max(existing Ids, 0) + 1``.
* ``update(id, partial)`` merges the explicitly set fields of a partial
  model onto the stored record.  The identifier is never merged.
* ``delete(id)`` removes the record and returns it.

Each call awaits a simulated network delay before touching the
collection.  Argument checks and payload validation run before the
delay; the lookup and the mutation after it run without awaiting, so a
mutation can never interleave with another coroutine.
"""

from __future__ import annotations

import asyncio
import logging
import re
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Generic, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from construction_dashboard_api.app.core.errors import DashboardError, InvalidArgumentError, NotFoundError
from construction_dashboard_api.app.core.notifications import NotificationCenter
from construction_dashboard_api.app.core.store import EntityStore


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)
Payload = Union[BaseModel, Mapping[str, Any]]

_DIGITS = re.compile(r"[0-9]+")


def coerce_id(value: Any, entity: str = "Record") -> int:
    """Convert ``value`` to a positive integer identifier.

    Accepts ints, integral floats and strings of ASCII digits.  Anything
    else, including booleans, zero and negative numbers, raises
    ``InvalidArgumentError``.
    """
    number: Optional[int] = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and _DIGITS.fullmatch(value.strip()):
        number = int(value.strip())
    if number is None or number <= 0:
        raise InvalidArgumentError(f"{entity} ID must be a positive integer, got {value!r}")
    return number


def next_id(records: List[Any]) -> int:
    """Return one more than the largest identifier, or 1 when empty."""
    return max((record.id for record in records), default=0) + 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CrudService(Generic[RecordT]):
    """Async CRUD operations on one collection of an ``EntityStore``."""

    entity: str = "Record"
    collection_name: str = ""
    read_model: Type[RecordT]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]

    # Simulated latency per operation, in seconds.
    delays: Dict[str, float] = {
        "get_all": 0.2,
        "get_by_id": 0.1,
        "create": 0.3,
        "update": 0.3,
        "delete": 0.2,
    }

    def __init__(
        self,
        store: EntityStore,
        notifications: Optional[NotificationCenter] = None,
        latency_scale: float = 1.0,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.store = store
        self.notifications = notifications or NotificationCenter()
        self.latency_scale = latency_scale
        self.clock = clock or utcnow

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @property
    def records(self) -> List[RecordT]:
        return self.store.collection(self.collection_name)

    async def _simulate_latency(self, operation: str) -> None:
        delay = self.delays.get(operation, 0.0) * self.latency_scale
        if delay > 0:
            await asyncio.sleep(delay)

    def _index_of(self, record_id: int) -> int:
        for index, record in enumerate(self.records):
            if record.id == record_id:
                return index
        raise NotFoundError(self.entity, record_id)

    def _validate(self, values: Dict[str, Any]) -> RecordT:
        try:
            return self.read_model.model_validate(values)
        except ValidationError as exc:
            raise InvalidArgumentError(f"Invalid {self.entity.lower()} data: {exc}") from exc

    def _payload(self, data: Payload, model: Type[BaseModel], exclude_unset: bool) -> Dict[str, Any]:
        if not isinstance(data, model):
            if not isinstance(data, (Mapping, BaseModel)):
                raise InvalidArgumentError(
                    f"Invalid {self.entity.lower()} data: expected a mapping or model, "
                    f"got {type(data).__name__}"
                )
            try:
                data = model.model_validate(data if isinstance(data, Mapping) else data.model_dump())
            except ValidationError as exc:
                raise InvalidArgumentError(f"Invalid {self.entity.lower()} data: {exc}") from exc
        values = data.model_dump(exclude_unset=exclude_unset)
        values.pop("id", None)
        return values

    def label(self, record: Any) -> str:
        name = getattr(record, "name", None)
        return f'{self.entity} "{name}"' if name else f"{self.entity} {record.id}"

    def _failed(self, action: str, exc: Exception) -> None:
        self.notifications.failure(
            f"Failed to {action} {self.entity.lower()}: {exc}",
            entity=self.collection_name,
            action=action,
        )

    def _succeeded(self, action: str, record: Any) -> None:
        past = {"create": "created", "update": "updated", "delete": "deleted"}[action]
        self.notifications.success(
            f"{self.label(record)} {past} successfully",
            entity=self.collection_name,
            action=action,
        )

    # Hooks for entity specific behaviour.
    def prepare_create(self, values: Dict[str, Any]) -> Dict[str, Any]:
        return values

    def prepare_update(self, existing: RecordT, changes: Dict[str, Any]) -> Dict[str, Any]:
        return changes

    def ordered(self, records: List[RecordT]) -> List[RecordT]:
        return records

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    async def get_all(self) -> List[RecordT]:
        await self._simulate_latency("get_all")
        return [record.model_copy(deep=True) for record in self.ordered(list(self.records))]

    async def get_by_id(self, record_id: Any) -> RecordT:
        record_id = coerce_id(record_id, self.entity)
        await self._simulate_latency("get_by_id")
        return self.records[self._index_of(record_id)].model_copy(deep=True)

    async def create(self, data: Payload) -> RecordT:
        try:
            values = self.prepare_create(self._payload(data, self.create_model, exclude_unset=False))
            # Validate with a provisional identifier; the real one is
            # assigned after the delay, when no other call can interleave.
            candidate = self._validate({**values, "id": next_id(self.records)})
            await self._simulate_latency("create")
            record = candidate.model_copy(update={"id": next_id(self.records)})
            self.records.append(record)
        except DashboardError as exc:
            self._failed("create", exc)
            raise
        logger.info("Created %s %s", self.entity.lower(), record.id)
        self._succeeded("create", record)
        return record.model_copy(deep=True)

    async def update(self, record_id: Any, changes: Payload) -> RecordT:
        try:
            record_id = coerce_id(record_id, self.entity)
            values = self._payload(changes, self.update_model, exclude_unset=True)
            await self._simulate_latency("update")
            index = self._index_of(record_id)
            existing = self.records[index]
            values = self.prepare_update(existing, values)
            merged = existing.model_dump()
            merged.update(values)
            merged["id"] = record_id
            record = self._validate(merged)
            self.records[index] = record
        except DashboardError as exc:
            self._failed("update", exc)
            raise
        logger.info("Updated %s %s: %s", self.entity.lower(), record_id, sorted(values))
        self._succeeded("update", record)
        return record.model_copy(deep=True)

    async def delete(self, record_id: Any) -> RecordT:
        try:
            record_id = coerce_id(record_id, self.entity)
            await self._simulate_latency("delete")
            index = self._index_of(record_id)
            record = self.records.pop(index)
        except DashboardError as exc:
            self._failed("delete", exc)
            raise
        logger.info("Deleted %s %s", self.entity.lower(), record_id)
        self._succeeded("delete", record)
        return record
