"""
Shared base for request bodies that patch records.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator

# Stamped by the server; ignored when a client echoes a full record back.
SERVER_STAMPED_FIELDS = frozenset({
    "id",
    "uploadDate",
    "upload_date",
    "updatedAt",
    "updated_at",
    "createdAt",
    "created_at",
})


class PatchModel(BaseModel):
    """Request body naming the record fields a caller may set."""

    model_config = ConfigDict(
        extra="forbid",
        populate_by_name=True,
    )

    # Fields that may be explicitly set to null by the caller
    nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def drop_server_stamped_fields(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if k not in SERVER_STAMPED_FIELDS}
        return data

    def changes(self) -> dict[str, Any]:
        """
        Fields the caller actually supplied, keyed by field name.

        An explicit null is kept only for nullable fields; for any other
        field it means "leave unchanged".
        """
        supplied = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in supplied.items()
            if value is not None or key in self.nullable_fields
        }
