"""Core utilities and exceptions for the Asset Catalog API."""

from app.core.exceptions import (
    CatalogAPIException,
    NotFoundException,
    AssetNotFoundException,
    CollectionNotFoundException,
    TagNotFoundException,
    ValidationException,
    StorageException,
)

__all__ = [
    "CatalogAPIException",
    "NotFoundException",
    "AssetNotFoundException",
    "CollectionNotFoundException",
    "TagNotFoundException",
    "ValidationException",
    "StorageException",
]
