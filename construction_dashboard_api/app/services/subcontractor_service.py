"""Service for subcontractors (external trades hired per project)."""

from construction_dashboard_api.app.schemas.resource import SubcontractorCreate, SubcontractorRead, SubcontractorUpdate
from construction_dashboard_api.app.services.base import CrudService


class SubcontractorService(CrudService[SubcontractorRead]):
    entity = "Subcontractor"
    collection_name = "subcontractors"
    read_model = SubcontractorRead
    create_model = SubcontractorCreate
    update_model = SubcontractorUpdate
