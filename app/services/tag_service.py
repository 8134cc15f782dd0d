"""
Tag service - Business logic for tag operations.
"""

import logging

from app.core.exceptions import TagNotFoundException, ValidationException
from app.db.repository import Repository
from app.models.asset import Asset
from app.models.tag import Tag
from app.schemas.tag import TagCreate

logger = logging.getLogger(__name__)


class TagService:
    """Service class for tag operations."""

    def __init__(self, repo: Repository):
        self.repo = repo

    def list_all(self) -> list[Tag]:
        return list(self.repo.tags)

    async def create(self, data: TagCreate) -> Tag:
        """
        Create a tag.

        Raises:
            ValidationException: If a tag with the same name exists,
                compared case-insensitively
        """
        async with self.repo.transaction() as repo:
            existing = repo.find_tag_by_name(data.name)
            if existing is not None:
                raise ValidationException(
                    "Tag already exists",
                    details={"name": data.name, "existing": existing.name},
                )
            tag = repo.add_tag(Tag(name=data.name))

        logger.info("Created tag %s (%s)", tag.id, tag.name)
        return tag

    async def delete(self, tag_id: str) -> list[Asset]:
        """
        Delete a tag and remove its name from every asset.

        Returns:
            The assets that lost the tag

        Raises:
            TagNotFoundException: If tag not found
        """
        async with self.repo.transaction() as repo:
            tag = repo.find_tag(tag_id)
            if tag is None:
                raise TagNotFoundException(tag_id)
            detached = repo.remove_tag(tag)

        logger.info("Deleted tag %s (%s); detached from %d assets", tag_id, tag.name, len(detached))
        return detached
