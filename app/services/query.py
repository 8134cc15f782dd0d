"""
Asset query engine - filtering and sorting over the asset list.
Pure functions; nothing here touches the repository or the store.
"""

from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any

from app.models.asset import Asset
from app.schemas.asset import AssetSearchParams


def matches_search(asset: Asset, text: str) -> bool:
    """Case-insensitive substring match on title, description, file name or any tag."""
    needle = text.casefold()
    return (
        needle in asset.title.casefold()
        or needle in asset.description.casefold()
        or needle in asset.file_name.casefold()
        or any(needle in tag.casefold() for tag in asset.tags)
    )


def matches_tags(asset: Asset, tag_names: Iterable[str]) -> bool:
    """True if the asset carries any of the requested tag names."""
    wanted = set(tag_names)
    return any(tag in wanted for tag in asset.tags)


def matches_collection(asset: Asset, collection_id: str) -> bool:
    return asset.collection_id == collection_id


def _upload_key(asset: Asset) -> datetime:
    # Documents written by older clients may carry naive timestamps
    if asset.upload_date.tzinfo is None:
        return asset.upload_date.replace(tzinfo=timezone.utc)
    return asset.upload_date


SORT_KEYS: dict[str, Callable[[Asset], Any]] = {
    "name": lambda asset: (asset.title.casefold(), asset.title),
    "date": _upload_key,
    "size": lambda asset: asset.file_size,
}


def filter_assets(assets: Iterable[Asset], params: AssetSearchParams) -> list[Asset]:
    """
    Apply search, tag and collection filters, then sort.

    Filters combine with AND. Sorting is stable; an unrecognized sort
    field leaves the input order unchanged.

    Args:
        assets: Assets in store order
        params: Filter and sort parameters

    Returns:
        New list of matching assets
    """
    results = list(assets)

    if params.search:
        results = [a for a in results if matches_search(a, params.search)]

    tag_list = params.tag_list
    if tag_list:
        results = [a for a in results if matches_tags(a, tag_list)]

    if params.collection_id:
        results = [a for a in results if matches_collection(a, params.collection_id)]

    sort_key = SORT_KEYS.get(params.sort_by or "")
    if sort_key is not None:
        results.sort(key=sort_key, reverse=params.descending)

    return results
