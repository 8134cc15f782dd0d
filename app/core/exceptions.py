"""
Custom exceptions for the Asset Catalog API.
Every exception carries the error code and HTTP status it renders as.
"""

from typing import Any


class CatalogAPIException(Exception):
    """Base exception for all catalog API errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: Any = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class ValidationException(CatalogAPIException):
    """400 - Malformed request (missing parameters, duplicate names)."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class NotFoundException(CatalogAPIException):
    """404 - Record lookup by id missed."""

    def __init__(self, resource: str, record_id: str):
        self.resource = resource
        self.record_id = record_id
        super().__init__(
            error="not_found",
            message=f"{resource} not found",
            status_code=404,
            details={"id": record_id},
        )


class AssetNotFoundException(NotFoundException):
    def __init__(self, asset_id: str):
        super().__init__("Asset", asset_id)


class CollectionNotFoundException(NotFoundException):
    def __init__(self, collection_id: str):
        super().__init__("Collection", collection_id)


class TagNotFoundException(NotFoundException):
    def __init__(self, tag_id: str):
        super().__init__("Tag", tag_id)


class StorageException(CatalogAPIException):
    """500 - Document store read or write failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="storage_error",
            message=message,
            status_code=500,
            details=details,
        )
