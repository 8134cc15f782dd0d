"""
Collection endpoints.
"""

from fastapi import APIRouter

from app.dependencies import Collections
from app.models.collection import Collection
from app.schemas.asset import MessageResponse
from app.schemas.collection import CollectionCreate, CollectionDetail, CollectionUpdate

router = APIRouter()


@router.get("", response_model=list[Collection])
async def list_collections(service: Collections):
    """List all collections."""
    return service.list_all()


@router.get("/{collection_id}", response_model=CollectionDetail)
async def get_collection(collection_id: str, service: Collections):
    """Get a collection together with its member assets."""
    collection = service.get_by_id(collection_id)
    return CollectionDetail.model_validate({
        **collection.model_dump(),
        "assets": service.members(collection_id),
    })


@router.post("", status_code=201, response_model=Collection)
async def create_collection(service: Collections, data: CollectionCreate):
    """Create a collection."""
    return await service.create(data)


@router.put("/{collection_id}", response_model=Collection)
async def update_collection(collection_id: str, service: Collections, data: CollectionUpdate):
    """
    Merge the supplied fields into a collection.

    A null name or description is ignored and the stored value is kept.
    """
    return await service.update(collection_id, data)


@router.delete("/{collection_id}", response_model=MessageResponse)
async def delete_collection(collection_id: str, service: Collections):
    """
    Delete a collection.

    Member assets are not deleted; their collectionId is set to null.
    """
    await service.delete(collection_id)
    return MessageResponse(message="Collection deleted successfully")
