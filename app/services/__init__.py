"""
Business logic services for the Asset Catalog API.
Services handle core operations separate from API endpoints.
"""

from app.services.asset_service import AssetService
from app.services.collection_service import CollectionService
from app.services.tag_service import TagService
from app.services.query import filter_assets

__all__ = [
    "AssetService",
    "CollectionService",
    "TagService",
    "filter_assets",
]
