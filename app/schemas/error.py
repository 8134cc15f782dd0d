"""
Pydantic schemas for error response bodies.
Used only to document errors in the OpenAPI schema; the handlers in
app.main build the bodies from CatalogAPIException.to_dict().
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Error body returned by every failing endpoint.

    Examples:
        400: {"error": "validation_failed", "message": "Tag already exists"}
        404: {"error": "not_found", "message": "Asset not found", "details": {"id": "..."}}
        500: {"error": "storage_error", "message": "Failed to write catalog document: ..."}
    """

    error: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["validation_failed", "not_found", "storage_error", "internal_error"],
    )
    message: str = Field(..., description="Message shown to the user")
    details: Any = Field(default=None, description="Offending id or field errors, when known")


class ValidationErrorDetail(BaseModel):
    """One failed field in a request body or query string."""

    loc: list[str | int]
    msg: str
    type: str


class ValidationErrorResponse(ErrorResponse):
    """400 body for malformed requests (missing assetIds, unknown fields)."""

    error: str = "validation_failed"
    message: str = "Request validation failed"
    details: list[ValidationErrorDetail] = Field(default_factory=list)
