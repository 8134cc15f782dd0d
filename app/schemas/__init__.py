"""
Pydantic schemas for request/response validation.
"""

from app.schemas.asset import (
    AssetCreate,
    AssetUpdate,
    AssetSearchParams,
    BulkUpdateRequest,
    BulkDeleteRequest,
    BulkDeleteResponse,
    MessageResponse,
)
from app.schemas.collection import CollectionCreate, CollectionUpdate, CollectionDetail
from app.schemas.tag import TagCreate
from app.schemas.error import ErrorResponse, ValidationErrorResponse

__all__ = [
    # Asset schemas
    "AssetCreate",
    "AssetUpdate",
    "AssetSearchParams",
    "BulkUpdateRequest",
    "BulkDeleteRequest",
    "BulkDeleteResponse",
    "MessageResponse",
    # Collection schemas
    "CollectionCreate",
    "CollectionUpdate",
    "CollectionDetail",
    # Tag schemas
    "TagCreate",
    # Error schemas
    "ErrorResponse",
    "ValidationErrorResponse",
]
