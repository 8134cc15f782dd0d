"""Base class and helpers shared by all catalog records."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict


def new_id() -> str:
    """Generate an opaque record identifier."""
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(BaseModel):
    """
    Base class for all persisted records.
    Fields use snake_case in Python and camelCase aliases on the wire.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Serialize the record the way it is stored in the catalog document."""
        return self.model_dump(mode="json", by_alias=True)
