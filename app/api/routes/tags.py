"""
Tag endpoints.
"""

from fastapi import APIRouter

from app.dependencies import Tags
from app.models.tag import Tag
from app.schemas.asset import MessageResponse
from app.schemas.tag import TagCreate

router = APIRouter()


@router.get("", response_model=list[Tag])
async def list_tags(service: Tags):
    """List all tags."""
    return service.list_all()


@router.post("", status_code=201, response_model=Tag)
async def create_tag(service: Tags, data: TagCreate):
    """
    Create a tag.

    Returns 400 if a tag with the same name already exists, ignoring case.
    """
    return await service.create(data)


@router.delete("/{tag_id}", response_model=MessageResponse)
async def delete_tag(tag_id: str, service: Tags):
    """
    Delete a tag.

    The tag name is also removed from every asset that carries it.
    """
    await service.delete(tag_id)
    return MessageResponse(message="Tag deleted successfully")
