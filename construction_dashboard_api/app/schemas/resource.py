"""
Pydantic models for project resources.

Resources are split into three collections: materials (stock-tracked
consumables), equipment (owned machinery) and subcontractors (external
trades).  Each follows the same Create / Update / Read pattern as
projects and tasks.
"""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import Field, field_validator

from construction_dashboard_api.app.schemas.base import CamelModel, ensure_utc


MaterialStatus = Literal["In Stock", "Low Stock", "Critical", "Ordered"]
EquipmentStatus = Literal["Available", "In Use", "Maintenance", "Out of Service"]
SubcontractorStatus = Literal["Active", "Pending", "Inactive"]
RequestUrgency = Literal["Low", "Normal", "High", "Urgent"]
StockState = Literal["critical", "low", "ok"]


# ----------------------------------------------------------------------
# Materials
# ----------------------------------------------------------------------
class MaterialBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["#5 Rebar"])
    category: str = ""
    unit: str = ""
    quantity_in_stock: int = Field(0, ge=0)
    quantity_needed: int = Field(0, ge=0)
    quantity_ordered: int = Field(0, ge=0)
    quantity_delivered: int = Field(0, ge=0)
    unit_cost: float = Field(0, ge=0)
    supplier: str = ""
    reorder_level: int = Field(0, ge=0)
    status: MaterialStatus = "In Stock"
    description: str = ""
    last_ordered: Optional[datetime] = None


class MaterialCreate(MaterialBase):
    """Schema for creating a material."""
    pass


class MaterialUpdate(CamelModel):
    """Schema for updating a material.  Only provided fields change."""

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None
    unit: Optional[str] = None
    quantity_in_stock: Optional[int] = Field(None, ge=0)
    quantity_needed: Optional[int] = Field(None, ge=0)
    quantity_ordered: Optional[int] = Field(None, ge=0)
    quantity_delivered: Optional[int] = Field(None, ge=0)
    unit_cost: Optional[float] = Field(None, ge=0)
    supplier: Optional[str] = None
    reorder_level: Optional[int] = Field(None, ge=0)
    status: Optional[MaterialStatus] = None
    description: Optional[str] = None
    last_ordered: Optional[datetime] = None


class MaterialRead(MaterialBase):
    id: int = Field(..., alias="Id", gt=0)

    @field_validator("last_ordered")
    @classmethod
    def assume_utc(cls, v):
        return ensure_utc(v)


class MaterialRequestCreate(CamelModel):
    """Body of a material request.

    ``quantity`` is a plain integer here; non-positive values are
    rejected by ``MaterialService.request_material``.
    """

    quantity: int
    notes: str = ""
    urgency: RequestUrgency = "Normal"


class MaterialRequestRead(CamelModel):
    id: int = Field(..., alias="Id", gt=0)
    material_id: int
    quantity: int
    notes: str = ""
    urgency: RequestUrgency = "Normal"
    requested_at: datetime

    @field_validator("requested_at")
    @classmethod
    def assume_utc(cls, v):
        return ensure_utc(v)


class MaterialFilterCriteria(CamelModel):
    """Criteria for the material inventory view."""

    search: Optional[str] = None
    status: Literal["all", "low", "critical", "ordered"] = "all"
    sort_by: Literal["name", "stock", "status", "supplier"] = "name"
    order: Literal["asc", "desc"] = "asc"


class MaterialStats(CamelModel):
    total: int
    low_stock: int
    critical: int
    ordered: int


# ----------------------------------------------------------------------
# Equipment
# ----------------------------------------------------------------------
class EquipmentBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["CAT 320 Excavator"])
    type: str = ""
    serial_number: str = ""
    status: EquipmentStatus = "Available"
    location: str = ""
    purchase_date: Optional[date] = None
    purchase_cost: float = Field(0, ge=0)
    hours_used: float = Field(0, ge=0)
    last_maintenance: Optional[date] = None
    next_maintenance: Optional[date] = None
    notes: str = ""


class EquipmentCreate(EquipmentBase):
    pass


class EquipmentUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    type: Optional[str] = None
    serial_number: Optional[str] = None
    status: Optional[EquipmentStatus] = None
    location: Optional[str] = None
    purchase_date: Optional[date] = None
    purchase_cost: Optional[float] = Field(None, ge=0)
    hours_used: Optional[float] = Field(None, ge=0)
    last_maintenance: Optional[date] = None
    next_maintenance: Optional[date] = None
    notes: Optional[str] = None


class EquipmentRead(EquipmentBase):
    id: int = Field(..., alias="Id", gt=0)


# ----------------------------------------------------------------------
# Subcontractors
# ----------------------------------------------------------------------
def _unique_specialties(value: Optional[List[str]]) -> Optional[List[str]]:
    if value is None:
        return None
    seen: List[str] = []
    for item in value:
        item = item.strip()
        if item and item not in seen:
            seen.append(item)
    return seen


class SubcontractorBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Summit Electrical"])
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    specialties: List[str] = Field(default_factory=list)
    rating: float = Field(0, ge=0, le=5)
    license_number: str = ""
    insurance_expiry: Optional[date] = None
    status: SubcontractorStatus = "Active"
    projects_completed: int = Field(0, ge=0)
    notes: str = ""

    @field_validator("specialties")
    @classmethod
    def validate_specialties(cls, v):
        return _unique_specialties(v)


class SubcontractorCreate(SubcontractorBase):
    pass


class SubcontractorUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    specialties: Optional[List[str]] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    license_number: Optional[str] = None
    insurance_expiry: Optional[date] = None
    status: Optional[SubcontractorStatus] = None
    projects_completed: Optional[int] = Field(None, ge=0)
    notes: Optional[str] = None

    @field_validator("specialties")
    @classmethod
    def validate_specialties(cls, v):
        return _unique_specialties(v)


class SubcontractorRead(SubcontractorBase):
    id: int = Field(..., alias="Id", gt=0)
