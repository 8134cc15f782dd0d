"""Collection record model."""

from datetime import datetime

from pydantic import Field

from app.db.base import Base, new_id, utcnow


class Collection(Base):
    """
    Named grouping of assets.
    Holds no member list; members are the assets whose
    ``collection_id`` points here.
    """

    id: str = Field(default_factory=new_id)
    name: str
    description: str = ""
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    def __repr__(self) -> str:
        return f"<Collection(id={self.id}, name={self.name!r})>"
