"""
Asset endpoints.
List/filter/sort, CRUD, bulk update and bulk delete.
"""

from fastapi import APIRouter, Query

from app.dependencies import Assets
from app.models.asset import Asset
from app.schemas.asset import (
    AssetCreate,
    AssetSearchParams,
    AssetUpdate,
    BulkDeleteRequest,
    BulkDeleteResponse,
    BulkUpdateRequest,
    MessageResponse,
)

router = APIRouter()


@router.get("", response_model=list[Asset])
async def list_assets(
    service: Assets,
    search: str | None = Query(default=None, description="Text matched against title, description, file name and tags"),
    tags: str | None = Query(default=None, description="Comma-separated tag filter (any match)"),
    collectionId: str | None = Query(default=None, description="Collection filter"),
    sortBy: str | None = Query(default=None, description="name, date or size"),
    sortOrder: str | None = Query(default=None, description="asc or desc"),
):
    """
    List assets, optionally filtered and sorted.

    Filters combine with AND:
    - search: case-insensitive substring of title, description, file name or a tag
    - tags: asset has at least one of the listed tags
    - collectionId: asset belongs to the collection

    The full matching set is returned; there is no pagination.
    """
    params = AssetSearchParams(
        search=search,
        tags=tags,
        collection_id=collectionId,
        sort_by=sortBy,
        sort_order=sortOrder,
    )
    return service.search(params)


@router.patch("/bulk", response_model=list[Asset])
async def bulk_update_assets(service: Assets, data: BulkUpdateRequest):
    """
    Apply one set of field updates to many assets.

    Ids that do not exist are skipped; only the assets actually updated
    are returned.
    """
    return await service.bulk_update(data.asset_ids, data.updates)


@router.post("/bulk-delete", response_model=BulkDeleteResponse)
async def bulk_delete_assets(service: Assets, data: BulkDeleteRequest):
    """Delete many assets in one request. Unknown ids are ignored."""
    deleted = await service.bulk_delete(data.asset_ids)
    return BulkDeleteResponse(
        message=f"{deleted} assets deleted successfully",
        deleted=deleted,
    )


@router.get("/{asset_id}", response_model=Asset)
async def get_asset(asset_id: str, service: Assets):
    """Get a single asset."""
    return service.get_by_id(asset_id)


@router.post("", status_code=201, response_model=Asset)
async def create_asset(service: Assets, data: AssetCreate):
    """
    Create a new asset.

    The server assigns id, uploadDate and updatedAt; those fields are
    ignored if present in the body.
    """
    return await service.create(data)


@router.put("/{asset_id}", response_model=Asset)
async def update_asset(asset_id: str, service: Assets, data: AssetUpdate):
    """
    Merge the supplied fields into an asset.

    Fields absent from the body are left unchanged. An explicit null
    clears collectionId or dimensions; for any other field null is
    ignored and the stored value is kept (the response shows it). The
    id always comes from the path.
    """
    return await service.update(asset_id, data)


@router.delete("/{asset_id}", response_model=MessageResponse)
async def delete_asset(asset_id: str, service: Assets):
    """Delete an asset."""
    await service.delete(asset_id)
    return MessageResponse(message="Asset deleted successfully")
