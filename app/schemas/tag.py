"""
Pydantic schemas for Tag request validation.
"""

from pydantic import Field, field_validator

from app.schemas.base import PatchModel


class TagCreate(PatchModel):
    """Schema for creating a tag (POST /tags)."""

    name: str = Field(..., min_length=1, max_length=50, examples=["Nature"])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject names that are only whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("Tag name must not be blank")
        return v
