"""
Record models for the Asset Catalog API.
Pydantic models persisted as part of a single catalog document.
"""

from app.models.asset import Asset, Dimensions
from app.models.collection import Collection
from app.models.tag import Tag
from app.models.document import CatalogDocument

__all__ = [
    "Asset",
    "Dimensions",
    "Collection",
    "Tag",
    "CatalogDocument",
]
