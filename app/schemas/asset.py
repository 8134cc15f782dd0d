"""
Pydantic schemas for Asset request validation and query parameters.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from app.models.asset import Dimensions
from app.schemas.base import PatchModel


# ===================
# Request Schemas
# ===================

class AssetCreate(PatchModel):
    """Schema for creating a new asset (POST /assets)."""

    title: str = Field(
        ...,
        min_length=1,
        description="Human-readable asset title",
        examples=["Mountain Landscape"],
    )
    description: str = Field(default="", description="Free-text description")
    tags: list[str] = Field(
        default_factory=list,
        description="Tag names; not checked against existing tags",
    )
    collection_id: str | None = Field(
        default=None,
        alias="collectionId",
        description="Owning collection, or null for uncategorized",
    )
    file_name: str = Field(default="", alias="fileName")
    file_size: int = Field(default=0, ge=0, alias="fileSize")
    dimensions: Dimensions | None = None
    format: str = Field(default="", examples=["JPEG"])
    image_url: str = Field(default="", alias="imageUrl")
    copyright: str = ""
    usage_rights: str = Field(default="", alias="usageRights")


class AssetUpdate(PatchModel):
    """
    Schema for merging fields into an asset (PUT /assets/{id}, bulk update).
    Only the fields present in the request body are applied.
    """

    nullable_fields: ClassVar[frozenset[str]] = frozenset({"collection_id", "dimensions"})

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    tags: list[str] | None = None
    collection_id: str | None = Field(default=None, alias="collectionId")
    file_name: str | None = Field(default=None, alias="fileName")
    file_size: int | None = Field(default=None, ge=0, alias="fileSize")
    dimensions: Dimensions | None = None
    format: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    copyright: str | None = None
    usage_rights: str | None = Field(default=None, alias="usageRights")


class BulkUpdateRequest(BaseModel):
    """Schema for PATCH /assets/bulk."""

    asset_ids: list[str] = Field(..., alias="assetIds")
    updates: AssetUpdate = Field(default_factory=AssetUpdate)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class BulkDeleteRequest(BaseModel):
    """Schema for POST /assets/bulk-delete."""

    asset_ids: list[str] = Field(..., alias="assetIds")

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# ===================
# Response Schemas
# ===================

class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete endpoints."""

    message: str


class BulkDeleteResponse(MessageResponse):
    deleted: int


# ===================
# Query Parameters
# ===================

class AssetSearchParams(BaseModel):
    """Query parameters for asset listing (GET /assets)."""

    search: str | None = Field(
        default=None,
        description="Case-insensitive text matched against title, description, file name and tags",
    )
    tags: str | None = Field(
        default=None,
        description="Comma-separated tag names; an asset matches if it has any of them",
    )
    collection_id: str | None = Field(
        default=None,
        alias="collectionId",
        description="Only assets in this collection",
    )
    sort_by: str | None = Field(
        default=None,
        alias="sortBy",
        description="One of name, date, size; other values leave store order",
    )
    sort_order: str | None = Field(
        default=None,
        alias="sortOrder",
        description="asc (default) or desc",
    )

    model_config = ConfigDict(populate_by_name=True)

    @property
    def tag_list(self) -> list[str]:
        """Requested tag names, stripped, empty entries dropped."""
        if not self.tags:
            return []
        return [t.strip() for t in self.tags.split(",") if t.strip()]

    @property
    def descending(self) -> bool:
        return self.sort_order == "desc"
