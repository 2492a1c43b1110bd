"""Service for owned equipment (excavators, mixers, lifts ...)."""

from construction_dashboard_api.app.schemas.resource import EquipmentCreate, EquipmentRead, EquipmentUpdate
from construction_dashboard_api.app.services.base import CrudService


class EquipmentService(CrudService[EquipmentRead]):
    entity = "Equipment"
    collection_name = "equipment"
    read_model = EquipmentRead
    create_model = EquipmentCreate
    update_model = EquipmentUpdate
