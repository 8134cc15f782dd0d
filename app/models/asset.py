"""
Asset record model.
An asset is a single media file with descriptive metadata, tag names
and an optional collection membership.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from app.db.base import Base, new_id, utcnow


class Dimensions(BaseModel):
    """Pixel dimensions of an image asset."""

    width: int = Field(ge=0)
    height: int = Field(ge=0)


class Asset(Base):
    """
    Media asset record.

    Membership in a collection is stored here (``collection_id``); a
    ``None`` value means the asset is uncategorized. Tags are referenced
    by name, not by tag id.
    """

    id: str = Field(default_factory=new_id)
    title: str
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    collection_id: str | None = Field(default=None, alias="collectionId")

    # File properties, captured at upload time
    file_name: str = Field(default="", alias="fileName")
    file_size: int = Field(default=0, ge=0, alias="fileSize")
    dimensions: Dimensions | None = None
    format: str = ""
    image_url: str = Field(default="", alias="imageUrl")

    # Rights
    copyright: str = ""
    usage_rights: str = Field(default="", alias="usageRights")

    upload_date: datetime = Field(default_factory=utcnow, alias="uploadDate")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")

    def __repr__(self) -> str:
        return f"<Asset(id={self.id}, title={self.title!r})>"
