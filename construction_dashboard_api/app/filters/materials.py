"""
Material inventory views.

Stock state is always derived from the current quantity, the reorder
level and the explicit ``status`` field; it is never stored.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Union

from construction_dashboard_api.app.schemas.resource import MaterialFilterCriteria, MaterialRead, MaterialStats, StockState
from construction_dashboard_api.app.filters import text_key


CRITICAL_RATIO = 0.5

Criteria = Union[MaterialFilterCriteria, Mapping[str, Any], None]


def is_low_stock(material: MaterialRead) -> bool:
    return material.quantity_in_stock <= material.reorder_level


def is_critical(material: MaterialRead) -> bool:
    return (
        material.status == "Critical"
        or material.quantity_in_stock <= material.reorder_level * CRITICAL_RATIO
    )


def stock_state(material: MaterialRead) -> StockState:
    if is_critical(material):
        return "critical"
    if is_low_stock(material):
        return "low"
    return "ok"


def _matches_status(material: MaterialRead, bucket: str) -> bool:
    if bucket == "low":
        return is_low_stock(material)
    if bucket == "critical":
        return is_critical(material)
    if bucket == "ordered":
        return material.status == "Ordered"
    return True


def _matches_search(material: MaterialRead, search: str) -> bool:
    if not search:
        return True
    return any(
        search in (field or "").casefold()
        for field in (material.name, material.category, material.supplier)
    )


_SORT_KEYS = {
    "name": lambda m: text_key(m.name),
    "stock": lambda m: m.quantity_in_stock,
    "status": lambda m: m.status,
    "supplier": lambda m: text_key(m.supplier),
}


def filter_materials(materials: Iterable[MaterialRead], criteria: Criteria = None) -> List[MaterialRead]:
    """Filter by search text and stock bucket, then sort."""
    if criteria is None:
        criteria = MaterialFilterCriteria()
    elif not isinstance(criteria, MaterialFilterCriteria):
        criteria = MaterialFilterCriteria.model_validate(criteria)

    search = (criteria.search or "").strip().casefold()
    matches = [
        m for m in materials
        if _matches_search(m, search) and _matches_status(m, criteria.status)
    ]
    return sorted(matches, key=_SORT_KEYS[criteria.sort_by], reverse=criteria.order == "desc")


def material_stats(materials: Iterable[MaterialRead]) -> MaterialStats:
    materials = list(materials)
    return MaterialStats(
        total=len(materials),
        low_stock=sum(1 for m in materials if is_low_stock(m)),
        critical=sum(1 for m in materials if is_critical(m)),
        ordered=sum(1 for m in materials if m.status == "Ordered"),
    )
