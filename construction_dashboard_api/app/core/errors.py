"""
Exceptions raised by the service layer.

Services raise these to their immediate caller without attempting any
recovery.  The API layer maps them onto HTTP status codes (400 and
404); other callers are expected to report them and leave their own
state unchanged.
"""


class DashboardError(Exception):
    """Base class for service-level failures."""


class InvalidArgumentError(DashboardError, ValueError):
    """An identifier or quantity argument is malformed."""


class NotFoundError(DashboardError, LookupError):
    """No record with the requested identifier exists."""

    def __init__(self, entity: str, record_id: int) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} with ID {record_id} not found")
