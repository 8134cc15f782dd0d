"""
Collection service - Business logic for collection operations.
"""

import logging

from app.core.exceptions import CollectionNotFoundException
from app.db.base import utcnow
from app.db.repository import Repository
from app.models.asset import Asset
from app.models.collection import Collection
from app.schemas.collection import CollectionCreate, CollectionUpdate

logger = logging.getLogger(__name__)


class CollectionService:
    """Service class for collection operations."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def list_all(self) -> list[Collection]:
        return list(self.repo.collections)

    def get_by_id(self, collection_id: str) -> Collection:
        """
        Get collection by ID.

        Raises:
            CollectionNotFoundException: If collection not found
        """
        collection = self.repo.find_collection(collection_id)
        if collection is None:
            raise CollectionNotFoundException(collection_id)
        return collection

    def members(self, collection_id: str) -> list[Asset]:
        """Assets currently pointing at the collection."""
        return self.repo.collection_members(collection_id)

    async def create(self, data: CollectionCreate) -> Collection:
        collection = Collection.model_validate({
            **data.model_dump(),
            "created_at": utcnow(),
        })

        async with self.repo.transaction() as repo:
            repo.add_collection(collection)

        logger.info("Created collection %s (%s)", collection.id, collection.name)
        return collection

    async def update(self, collection_id: str, data: CollectionUpdate) -> Collection:
        """
        Merge the supplied fields into a collection.

        Raises:
            CollectionNotFoundException: If collection not found
        """
        async with self.repo.transaction() as repo:
            current = self.get_by_id(collection_id)
            collection = repo.replace_collection(
                Collection.model_validate({
                    **current.model_dump(),
                    **data.changes(),
                    "id": collection_id,
                })
            )

        logger.info("Updated collection %s", collection_id)
        return collection

    async def delete(self, collection_id: str) -> list[Asset]:
        """
        Delete a collection. Member assets are kept and become uncategorized.

        Returns:
            The assets that were moved out of the collection

        Raises:
            CollectionNotFoundException: If collection not found
        """
        async with self.repo.transaction() as repo:
            orphaned = repo.remove_collection(self.get_by_id(collection_id))

        logger.info(
            "Deleted collection %s; %d assets now uncategorized",
            collection_id,
            len(orphaned),
        )
        return orphaned
