"""
HTTP client for the Asset Catalog API.

Thin async wrappers over httpx, one per REST resource. Responses are
decoded into the same record models the server uses. Any non-2xx
response raises CatalogAPIError with the server's message.
"""

from collections.abc import Iterable
from typing import Any

import httpx

from app.client.state import FilterState
from app.models import Asset, Collection, Tag
from app.schemas.collection import CollectionDetail


class CatalogAPIError(Exception):
    """Error response returned by the catalog API."""

    def __init__(self, status_code: int, error: str, message: str):
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)


class _Resource:
    """Shared request/response handling for one API resource."""

    def __init__(self, http: httpx.AsyncClient, path: str):
        self.http = http
        self.path = path

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        response = await self.http.request(method, url, **kwargs)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            raise CatalogAPIError(
                status_code=response.status_code,
                error=body.get("error", "error"),
                message=body.get("message") or body.get("error") or "An error occurred",
            )
        return response.json()


class AssetsAPI(_Resource):
    async def get_all(self, filters: FilterState | None = None) -> list[Asset]:
        params = filters.to_query_params() if filters else {}
        data = await self._request("GET", self.path, params=params)
        return [Asset.model_validate(item) for item in data]

    async def get_by_id(self, asset_id: str) -> Asset:
        return Asset.model_validate(await self._request("GET", f"{self.path}/{asset_id}"))

    async def create(self, asset: dict[str, Any]) -> Asset:
        return Asset.model_validate(await self._request("POST", self.path, json=asset))

    async def update(self, asset_id: str, updates: dict[str, Any]) -> Asset:
        data = await self._request("PUT", f"{self.path}/{asset_id}", json=updates)
        return Asset.model_validate(data)

    async def delete(self, asset_id: str) -> str:
        data = await self._request("DELETE", f"{self.path}/{asset_id}")
        return data["message"]

    async def bulk_update(self, asset_ids: Iterable[str], updates: dict[str, Any]) -> list[Asset]:
        data = await self._request(
            "PATCH",
            f"{self.path}/bulk",
            json={"assetIds": list(asset_ids), "updates": updates},
        )
        return [Asset.model_validate(item) for item in data]

    async def bulk_delete(self, asset_ids: Iterable[str]) -> int:
        data = await self._request(
            "POST",
            f"{self.path}/bulk-delete",
            json={"assetIds": list(asset_ids)},
        )
        return data["deleted"]


class CollectionsAPI(_Resource):
    async def get_all(self) -> list[Collection]:
        return [Collection.model_validate(item) for item in await self._request("GET", self.path)]

    async def get_by_id(self, collection_id: str) -> CollectionDetail:
        data = await self._request("GET", f"{self.path}/{collection_id}")
        return CollectionDetail.model_validate(data)

    async def create(self, collection: dict[str, Any]) -> Collection:
        return Collection.model_validate(await self._request("POST", self.path, json=collection))

    async def update(self, collection_id: str, updates: dict[str, Any]) -> Collection:
        data = await self._request("PUT", f"{self.path}/{collection_id}", json=updates)
        return Collection.model_validate(data)

    async def delete(self, collection_id: str) -> str:
        data = await self._request("DELETE", f"{self.path}/{collection_id}")
        return data["message"]


class TagsAPI(_Resource):
    async def get_all(self) -> list[Tag]:
        return [Tag.model_validate(item) for item in await self._request("GET", self.path)]

    async def create(self, name: str) -> Tag:
        return Tag.model_validate(await self._request("POST", self.path, json={"name": name}))

    async def delete(self, tag_id: str) -> str:
        data = await self._request("DELETE", f"{self.path}/{tag_id}")
        return data["message"]


class CatalogClient:
    """
    Entry point for talking to a catalog server.

    Usage:
        async with CatalogClient("http://localhost:5000") as client:
            assets = await client.assets.get_all()

    An existing httpx.AsyncClient may be passed in (for example one bound
    to an ASGI app in tests); it is then not closed by this client.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        http: httpx.AsyncClient | None = None,
        api_prefix: str = "/api",
        timeout: float = 10.0,
    ):
        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(base_url=base_url, timeout=timeout)

        self.assets = AssetsAPI(self.http, f"{api_prefix}/assets")
        self.collections = CollectionsAPI(self.http, f"{api_prefix}/collections")
        self.tags = TagsAPI(self.http, f"{api_prefix}/tags")

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
