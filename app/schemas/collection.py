"""
Pydantic schemas for Collection request/response validation.
"""

from pydantic import Field

from app.models.asset import Asset
from app.models.collection import Collection
from app.schemas.base import PatchModel


class CollectionCreate(PatchModel):
    """Schema for creating a collection (POST /collections)."""

    name: str = Field(..., min_length=1, examples=["Marketing Assets"])
    description: str = ""


class CollectionUpdate(PatchModel):
    """Schema for merging fields into a collection (PUT /collections/{id})."""

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class CollectionDetail(Collection):
    """A collection together with the assets that currently point at it."""

    assets: list[Asset] = Field(default_factory=list)
