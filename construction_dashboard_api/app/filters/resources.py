"""Search filters for the equipment and subcontractor tabs."""

from __future__ import annotations

from typing import Iterable, List, Optional

from construction_dashboard_api.app.schemas.resource import EquipmentRead, SubcontractorRead


def filter_equipment(items: Iterable[EquipmentRead], search: Optional[str] = None) -> List[EquipmentRead]:
    """Match ``search`` against name, type and status."""
    needle = (search or "").strip().casefold()
    if not needle:
        return list(items)
    return [
        item for item in items
        if needle in item.name.casefold()
        or needle in item.type.casefold()
        or needle in item.status.casefold()
    ]


def filter_subcontractors(
    items: Iterable[SubcontractorRead], search: Optional[str] = None
) -> List[SubcontractorRead]:
    """Match ``search`` against name, contact person and any specialty."""
    needle = (search or "").strip().casefold()
    if not needle:
        return list(items)
    return [
        item for item in items
        if needle in item.name.casefold()
        or needle in item.contact_person.casefold()
        or any(needle in specialty.casefold() for specialty in item.specialties)
    ]
