"""
In-memory catalog repository.

The repository owns the asset, collection and tag lists for the process
lifetime. Reads see the current lists directly. Every mutation runs inside
``transaction()``, which holds a single writer lock and writes the whole
catalog document to the configured store before releasing it.
"""

import asyncio
import logging
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from app.core.exceptions import StorageException
from app.db.base import utcnow
from app.db.integrity import detach_tag_name, null_collection_references
from app.db.seed import build_sample_document
from app.models import Asset, CatalogDocument, Collection, Tag
from app.storage import DocumentStore, get_document_store

logger = logging.getLogger(__name__)

# Top-level document keys and the record model stored under each
RECORD_TYPES = {"assets": Asset, "collections": Collection, "tags": Tag}


class Repository:
    """Single-writer owner of the catalog records."""

    def __init__(self, store: DocumentStore):
        self.store = store
        self.assets: list[Asset] = []
        self.collections: list[Collection] = []
        self.tags: list[Tag] = []
        self._lock = asyncio.Lock()
        # Set when the stored document could not be read; writes are refused
        self.load_error: str | None = None

    # ------------------------------------------------------------------
    # Loading and persistence
    # ------------------------------------------------------------------

    async def load(self, seed: bool = False) -> None:
        """
        Replace the in-memory lists with the stored document.

        Records are validated one at a time; a record that does not fit
        the schema is logged and skipped, and the rest are kept. When
        nothing is stored yet and ``seed`` is set, the sample catalog is
        installed and saved. A document that cannot be read at all is
        logged, the repository starts from the sample catalog (or empty),
        and every later write is refused so the file is never replaced.
        """
        self.load_error = None
        try:
            raw = await self.store.load()
            document = self._decode(raw) if raw is not None else None
        except StorageException as e:
            logger.exception("Error loading catalog from %s", self.store.describe())
            self.load_error = e.message
            self._install(build_sample_document() if seed else CatalogDocument())
            return

        if document is not None:
            self._install(document)
            logger.info(
                "Catalog loaded from %s: %d assets, %d collections, %d tags",
                self.store.describe(),
                len(self.assets),
                len(self.collections),
                len(self.tags),
            )
            return

        if seed:
            self._install(build_sample_document())
            await self._persist()
            logger.info("Initialized %s with sample data", self.store.describe())
        else:
            self._install(CatalogDocument())

    def _decode(self, raw: Any) -> CatalogDocument:
        """Build a document from stored JSON, dropping records that fail validation."""
        if not isinstance(raw, dict):
            raise StorageException("Catalog document is not a JSON object")

        records: dict[str, list] = {}
        for key, model in RECORD_TYPES.items():
            items = raw.get(key) or []
            if not isinstance(items, list):
                raise StorageException(f"Catalog document field '{key}' is not a list")

            records[key] = []
            for index, item in enumerate(items):
                try:
                    records[key].append(model.model_validate(item))
                except ValidationError as e:
                    logger.warning(
                        "Skipping invalid %s record %d in %s: %s",
                        key,
                        index,
                        self.store.describe(),
                        e.errors(include_url=False),
                    )

        return CatalogDocument(**records)

    def _install(self, document: CatalogDocument) -> None:
        self.assets = list(document.assets)
        self.collections = list(document.collections)
        self.tags = list(document.tags)

    def snapshot(self) -> CatalogDocument:
        return CatalogDocument(
            assets=self.assets,
            collections=self.collections,
            tags=self.tags,
        )

    async def _persist(self) -> None:
        try:
            await self.store.save(self.snapshot().to_document())
        except StorageException:
            logger.error(
                "Error saving catalog to %s; in-memory state is ahead of the store",
                self.store.describe(),
            )
            raise

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["Repository"]:
        """
        Run a mutation under the writer lock and persist once on success.

        If the body raises, nothing is written. If the write itself fails,
        the in-memory change is kept and StorageException propagates.

        Raises:
            StorageException: If the stored document could not be read at
                startup, before the body runs
        """
        async with self._lock:
            if self.load_error is not None:
                raise StorageException(
                    "Catalog is read-only because the stored document could not be loaded",
                    details={"store": self.store.describe(), "reason": self.load_error},
                )
            yield self
            await self._persist()

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def find_asset(self, asset_id: str) -> Asset | None:
        return next((a for a in self.assets if a.id == asset_id), None)

    def find_collection(self, collection_id: str) -> Collection | None:
        return next((c for c in self.collections if c.id == collection_id), None)

    def find_tag(self, tag_id: str) -> Tag | None:
        return next((t for t in self.tags if t.id == tag_id), None)

    def find_tag_by_name(self, name: str) -> Tag | None:
        """Case-insensitive lookup."""
        return next((t for t in self.tags if t.matches(name)), None)

    def collection_members(self, collection_id: str) -> list[Asset]:
        return [a for a in self.assets if a.collection_id == collection_id]

    # ------------------------------------------------------------------
    # Record changes (call inside transaction())
    # ------------------------------------------------------------------

    def add_asset(self, asset: Asset) -> Asset:
        self.assets.append(asset)
        return asset

    def replace_asset(self, asset: Asset) -> Asset:
        """Swap in a new version of an existing asset, keeping its position."""
        for index, current in enumerate(self.assets):
            if current.id == asset.id:
                self.assets[index] = asset
                return asset
        raise KeyError(asset.id)

    def remove_assets(self, asset_ids: Iterable[str]) -> int:
        """Remove every asset whose id is listed. Returns how many were removed."""
        doomed = set(asset_ids)
        before = len(self.assets)
        self.assets = [a for a in self.assets if a.id not in doomed]
        return before - len(self.assets)

    def add_collection(self, collection: Collection) -> Collection:
        self.collections.append(collection)
        return collection

    def replace_collection(self, collection: Collection) -> Collection:
        for index, current in enumerate(self.collections):
            if current.id == collection.id:
                self.collections[index] = collection
                return collection
        raise KeyError(collection.id)

    def remove_collection(self, collection: Collection) -> list[Asset]:
        """
        Delete a collection, nulling the membership of its assets.

        Returns:
            The assets that were moved to uncategorized
        """
        orphaned = null_collection_references(self.assets, collection.id, utcnow())
        self.collections = [c for c in self.collections if c.id != collection.id]
        return orphaned

    def add_tag(self, tag: Tag) -> Tag:
        self.tags.append(tag)
        return tag

    def remove_tag(self, tag: Tag) -> list[Asset]:
        """
        Delete a tag and detach its name from every asset.

        Returns:
            The assets that lost the tag
        """
        self.tags = [t for t in self.tags if t.id != tag.id]
        return detach_tag_name(self.assets, tag.name, utcnow())


@lru_cache
def get_repository() -> Repository:
    """
    Dependency function for FastAPI.
    Returns the process-wide repository over the configured store.
    """
    return Repository(get_document_store())
