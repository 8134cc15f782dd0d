"""The catalog document: the single unit of persistence."""

from pydantic import Field

from app.db.base import Base
from app.models.asset import Asset
from app.models.collection import Collection
from app.models.tag import Tag


class CatalogDocument(Base):
    """All assets, collections and tags, stored and written as one document."""

    assets: list[Asset] = Field(default_factory=list)
    collections: list[Collection] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
