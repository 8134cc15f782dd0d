"""
Client state store.

Mirrors the server's assets, collections and tags and holds local UI
state (selection, view mode, filters). Every mutation is sent to the
server and followed by a full re-fetch of the affected lists; nothing is
patched locally. A failed request only sets ``error``; data already
loaded stays as it was.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

import httpx

from app.client.api import CatalogAPIError, CatalogClient
from app.client.state import FilterState, ResourceStatus, ViewMode
from app.models import Asset, Collection, Tag

logger = logging.getLogger(__name__)

Listener = Callable[["ClientStore"], None]

# Failures that end up in the error slot
REQUEST_ERRORS = (CatalogAPIError, httpx.HTTPError)


class ClientStore:
    """Single store for one client session."""

    def __init__(self, client: CatalogClient):
        self.client = client

        # Server mirrors
        self.assets: list[Asset] = []
        self.collections: list[Collection] = []
        self.tags: list[Tag] = []
        self.status: dict[str, ResourceStatus] = {
            "assets": ResourceStatus.IDLE,
            "collections": ResourceStatus.IDLE,
            "tags": ResourceStatus.IDLE,
        }

        # UI state
        self.view_mode: ViewMode = "grid"
        self.filters = FilterState()
        self.selected_assets: set[str] = set()
        self.selected_asset: Asset | None = None
        self.is_loading = False
        self.error: str | None = None

        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener`` after every state change.

        Returns:
            Function that removes the listener; calling it again is a no-op
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        for name, value in changes.items():
            setattr(self, name, value)
        for listener in list(self._listeners):
            listener(self)

    def _set_status(self, resource: str, status: ResourceStatus, **changes: Any) -> None:
        self._set(status={**self.status, resource: status}, **changes)

    def _fail(self, exc: Exception) -> None:
        logger.warning("Catalog request failed: %s", exc)
        self._set(error=str(exc) or exc.__class__.__name__)

    # ------------------------------------------------------------------
    # UI actions
    # ------------------------------------------------------------------

    def set_view_mode(self, mode: ViewMode) -> None:
        self._set(view_mode=mode)

    async def set_filters(self, **changes: Any) -> None:
        """Merge filter fields into the current filters and re-fetch assets."""
        self._set(filters=self.filters.merged(**changes))
        await self.fetch_assets()

    def set_selected_assets(self, asset_ids: Iterable[str]) -> None:
        self._set(selected_assets=set(asset_ids))

    def toggle_asset_selection(self, asset_id: str) -> None:
        selected = set(self.selected_assets)
        if asset_id in selected:
            selected.remove(asset_id)
        else:
            selected.add(asset_id)
        self._set(selected_assets=selected)

    def clear_selection(self) -> None:
        self._set(selected_assets=set())

    def set_selected_asset(self, asset: Asset | None) -> None:
        self._set(selected_asset=asset)

    def clear_error(self) -> None:
        """Dismiss the error banner. Successful requests never clear it."""
        self._set(error=None)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    async def load_all(self) -> None:
        """Initial load of all three resource lists."""
        await self.fetch_assets()
        await self.fetch_collections()
        await self.fetch_tags()

    async def fetch_assets(self) -> None:
        self._set_status("assets", ResourceStatus.LOADING, is_loading=True)
        try:
            assets = await self.client.assets.get_all(self.filters)
        except REQUEST_ERRORS as exc:
            self._set_status("assets", ResourceStatus.ERRORED, is_loading=False)
            self._fail(exc)
            return
        self._set_status("assets", ResourceStatus.LOADED, assets=assets, is_loading=False)

    async def fetch_collections(self) -> None:
        self._set_status("collections", ResourceStatus.LOADING)
        try:
            collections = await self.client.collections.get_all()
        except REQUEST_ERRORS as exc:
            self._set_status("collections", ResourceStatus.ERRORED)
            self._fail(exc)
            return
        self._set_status("collections", ResourceStatus.LOADED, collections=collections)

    async def fetch_tags(self) -> None:
        self._set_status("tags", ResourceStatus.LOADING)
        try:
            tags = await self.client.tags.get_all()
        except REQUEST_ERRORS as exc:
            self._set_status("tags", ResourceStatus.ERRORED)
            self._fail(exc)
            return
        self._set_status("tags", ResourceStatus.LOADED, tags=tags)

    # ------------------------------------------------------------------
    # Asset operations
    # ------------------------------------------------------------------

    async def create_asset(self, asset: dict[str, Any]) -> None:
        try:
            await self.client.assets.create(asset)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_assets()

    async def update_asset(self, asset_id: str, updates: dict[str, Any]) -> None:
        try:
            await self.client.assets.update(asset_id, updates)
            await self.fetch_assets()
            if self.selected_asset is not None and self.selected_asset.id == asset_id:
                self._set(selected_asset=await self.client.assets.get_by_id(asset_id))
        except REQUEST_ERRORS as exc:
            self._fail(exc)

    async def delete_asset(self, asset_id: str) -> None:
        try:
            await self.client.assets.delete(asset_id)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_assets()
        if self.selected_asset is not None and self.selected_asset.id == asset_id:
            self._set(selected_asset=None)

    async def bulk_update_assets(
        self,
        updates: dict[str, Any],
        asset_ids: Iterable[str] | None = None,
    ) -> None:
        """
        Apply ``updates`` to the given assets, or to the current selection.
        The selection is cleared once the server accepts the request.
        """
        ids = list(self.selected_assets if asset_ids is None else asset_ids)
        try:
            await self.client.assets.bulk_update(ids, updates)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_assets()
        self.clear_selection()

    async def bulk_delete_assets(self, asset_ids: Iterable[str] | None = None) -> None:
        """Delete the given assets, or the current selection, then clear the selection."""
        ids = list(self.selected_assets if asset_ids is None else asset_ids)
        try:
            await self.client.assets.bulk_delete(ids)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_assets()
        self.clear_selection()

    # ------------------------------------------------------------------
    # Collection operations
    # ------------------------------------------------------------------

    async def create_collection(self, collection: dict[str, Any]) -> None:
        try:
            await self.client.collections.create(collection)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_collections()

    async def update_collection(self, collection_id: str, updates: dict[str, Any]) -> None:
        try:
            await self.client.collections.update(collection_id, updates)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_collections()

    async def delete_collection(self, collection_id: str) -> None:
        """Member assets change server-side, so assets are re-fetched too."""
        try:
            await self.client.collections.delete(collection_id)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_collections()
        await self.fetch_assets()

    # ------------------------------------------------------------------
    # Tag operations
    # ------------------------------------------------------------------

    async def create_tag(self, name: str) -> None:
        try:
            await self.client.tags.create(name)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_tags()

    async def delete_tag(self, tag_id: str) -> None:
        try:
            await self.client.tags.delete(tag_id)
        except REQUEST_ERRORS as exc:
            self._fail(exc)
            return
        await self.fetch_tags()
        await self.fetch_assets()
