"""
FastAPI dependency injection functions.
Provides common dependencies used across endpoints.
"""

from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.db.repository import Repository, get_repository
from app.services import AssetService, CollectionService, TagService


# Type aliases for cleaner endpoint signatures
Repo = Annotated[Repository, Depends(get_repository)]
AppSettings = Annotated[Settings, Depends(get_settings)]


def get_asset_service(repo: Repo) -> AssetService:
    return AssetService(repo)


def get_collection_service(repo: Repo) -> CollectionService:
    return CollectionService(repo)


def get_tag_service(repo: Repo) -> TagService:
    return TagService(repo)


Assets = Annotated[AssetService, Depends(get_asset_service)]
Collections = Annotated[CollectionService, Depends(get_collection_service)]
Tags = Annotated[TagService, Depends(get_tag_service)]
