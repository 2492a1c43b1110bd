"""
Service for construction materials.

Materials follow the common CRUD contract and additionally support
material requests.  A request raises ``quantityOrdered`` by the
requested amount, stamps ``lastOrdered`` and is kept in the store's
request log.  Stock on hand only changes through an explicit update
(e.g. when a delivery is booked); a request never touches it, nor the
``status`` field.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, get_args

from construction_dashboard_api.app.core.errors import DashboardError, InvalidArgumentError
from construction_dashboard_api.app.schemas.resource import (
    MaterialCreate,
    MaterialRead,
    MaterialRequestRead,
    MaterialUpdate,
    RequestUrgency,
)
from construction_dashboard_api.app.services.base import CrudService, coerce_id, next_id


logger = logging.getLogger(__name__)


def _positive_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidArgumentError(f"Quantity must be a positive integer, got {value!r}")
    return value


def _urgency(value: Any) -> str:
    allowed = get_args(RequestUrgency)
    if value not in allowed:
        raise InvalidArgumentError(f"Urgency must be one of {', '.join(allowed)}, got {value!r}")
    return value


def _notes(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"Notes must be text, got {type(value).__name__}")
    return value


class MaterialService(CrudService[MaterialRead]):
    """CRUD operations on ``EntityStore.materials`` plus material requests."""

    entity = "Material"
    collection_name = "materials"
    read_model = MaterialRead
    create_model = MaterialCreate
    update_model = MaterialUpdate

    delays = {
        "get_all": 0.2,
        "get_by_id": 0.1,
        "create": 0.3,
        "update": 0.3,
        "delete": 0.2,
        "request": 0.3,
    }

    async def request_material(
        self,
        material_id: Any,
        quantity: Any,
        notes: str = "",
        urgency: RequestUrgency = "Normal",
    ) -> MaterialRequestRead:
        """Record a request for more of a material.

        Raises
        ------
        InvalidArgumentError
            If ``material_id`` or ``quantity`` is not a positive integer,
            ``urgency`` is not a known level or ``notes`` is not text.
        NotFoundError
            If the material does not exist.
        """
        try:
            material_id = coerce_id(material_id, self.entity)
            quantity = _positive_quantity(quantity)
            urgency = _urgency(urgency)
            notes = _notes(notes)
            await self._simulate_latency("request")
            index = self._index_of(material_id)
            now = self.clock()
            material = self.records[index]
            request = MaterialRequestRead(
                id=next_id(self.store.material_requests),
                material_id=material_id,
                quantity=quantity,
                notes=notes,
                urgency=urgency,
                requested_at=now,
            )
            self.records[index] = material.model_copy(
                update={
                    "quantity_ordered": material.quantity_ordered + quantity,
                    "last_ordered": now,
                }
            )
            self.store.material_requests.append(request)
        except DashboardError as exc:
            self._failed("request", exc)
            raise
        logger.info("Requested %s x material %s (%s)", quantity, material_id, urgency)
        self.notifications.success(
            f'Requested {quantity} {material.unit or "units"} of "{material.name}"',
            entity=self.collection_name,
            action="request",
        )
        return request.model_copy()

    async def list_requests(self, material_id: Optional[Any] = None) -> List[MaterialRequestRead]:
        """Return logged requests, optionally for a single material."""
        if material_id is not None:
            material_id = coerce_id(material_id, self.entity)
        await self._simulate_latency("get_all")
        return [
            request.model_copy()
            for request in self.store.material_requests
            if material_id is None or request.material_id == material_id
        ]
