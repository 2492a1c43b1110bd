"""
Shared pydantic configuration for dashboard records.

Records are exchanged with the fixture files and API clients using the
camelCase field names of the seed fixtures (``Id``, ``projectId``,
``quantityInStock`` ...).  Python code uses snake_case attributes;
both spellings are accepted when validating input.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising snake_case attributes as camelCase."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps from fixtures as UTC so they compare cleanly."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
