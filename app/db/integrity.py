"""
Referential-integrity rules applied when records are deleted.

Assets point at collections by id and at tags by name. Neither
deletion removes assets; the references are cleared instead.
"""

from datetime import datetime

from app.models.asset import Asset


def null_collection_references(
    assets: list[Asset],
    collection_id: str,
    now: datetime,
) -> list[Asset]:
    """
    Null-on-delete: move every member of a collection to uncategorized.

    Returns:
        The assets that were changed
    """
    changed = []
    for asset in assets:
        if asset.collection_id == collection_id:
            asset.collection_id = None
            asset.updated_at = now
            changed.append(asset)
    return changed


def detach_tag_name(
    assets: list[Asset],
    tag_name: str,
    now: datetime,
) -> list[Asset]:
    """
    Detach-on-delete: remove a tag name from every asset's tag list.

    Matching is exact, so differently-cased copies of the name stay.

    Returns:
        The assets that were changed
    """
    changed = []
    for asset in assets:
        if tag_name in asset.tags:
            asset.tags = [t for t in asset.tags if t != tag_name]
            asset.updated_at = now
            changed.append(asset)
    return changed
