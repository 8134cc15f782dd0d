"""
Asset service - Business logic for asset operations.
Handles CRUD, listing, and bulk update/delete.
"""

import logging
from collections.abc import Sequence

from app.core.exceptions import AssetNotFoundException
from app.db.base import utcnow
from app.db.repository import Repository
from app.models.asset import Asset
from app.schemas.asset import AssetCreate, AssetSearchParams, AssetUpdate
from app.services.query import filter_assets

logger = logging.getLogger(__name__)


class AssetService:
    """Service class for asset operations."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def get_by_id(self, asset_id: str) -> Asset:
        """
        Get asset by ID.

        Raises:
            AssetNotFoundException: If asset not found
        """
        asset = self.repo.find_asset(asset_id)
        if asset is None:
            raise AssetNotFoundException(asset_id)
        return asset

    def search(self, params: AssetSearchParams) -> list[Asset]:
        """List assets matching the filters, in the requested order."""
        return filter_assets(self.repo.assets, params)

    async def create(self, data: AssetCreate) -> Asset:
        """
        Create a new asset.

        The id, upload date and update timestamp are assigned here.
        """
        now = utcnow()
        asset = Asset.model_validate({
            **data.model_dump(),
            "upload_date": now,
            "updated_at": now,
        })

        async with self.repo.transaction() as repo:
            repo.add_asset(asset)

        logger.info("Created asset %s (%s)", asset.id, asset.title)
        return asset

    async def update(self, asset_id: str, data: AssetUpdate) -> Asset:
        """
        Merge the supplied fields into an asset.

        Raises:
            AssetNotFoundException: If asset not found
        """
        async with self.repo.transaction() as repo:
            asset = repo.replace_asset(self._merge(self.get_by_id(asset_id), data))

        logger.info("Updated asset %s", asset_id)
        return asset

    async def delete(self, asset_id: str) -> None:
        """
        Delete an asset. Collections and tags are unaffected.

        Raises:
            AssetNotFoundException: If asset not found
        """
        async with self.repo.transaction() as repo:
            self.get_by_id(asset_id)
            repo.remove_assets([asset_id])

        logger.info("Deleted asset %s", asset_id)

    async def bulk_update(self, asset_ids: Sequence[str], data: AssetUpdate) -> list[Asset]:
        """
        Apply the same update to several assets.

        Unknown ids are skipped without error.

        Returns:
            The updated assets, in request order
        """
        if not asset_ids:
            return []

        updated = []
        async with self.repo.transaction() as repo:
            for asset_id in asset_ids:
                asset = repo.find_asset(asset_id)
                if asset is None:
                    continue
                updated.append(repo.replace_asset(self._merge(asset, data)))

        logger.info("Bulk updated %d of %d requested assets", len(updated), len(asset_ids))
        return updated

    async def bulk_delete(self, asset_ids: Sequence[str]) -> int:
        """
        Delete every listed asset in one pass.

        Returns:
            Number of assets actually removed
        """
        if not asset_ids:
            return 0

        async with self.repo.transaction() as repo:
            deleted = repo.remove_assets(asset_ids)

        logger.info("Bulk deleted %d of %d requested assets", deleted, len(asset_ids))
        return deleted

    def _merge(self, asset: Asset, data: AssetUpdate) -> Asset:
        """Shallow-merge the update over a copy of the asset and re-stamp it."""
        return Asset.model_validate({
            **asset.model_dump(),
            **data.changes(),
            "id": asset.id,
            "updated_at": utcnow(),
        })
