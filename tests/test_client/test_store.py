"""
Tests for the client state store against the test app.
"""

import pytest
from httpx import AsyncClient

from app.client import CatalogAPIError, CatalogClient, ClientStore, FilterState, ResourceStatus


@pytest.mark.asyncio
async def test_load_all(client_store: ClientStore, create_asset, create_collection, create_tag):
    await create_collection()
    await create_tag("Nature")
    await create_asset()

    await client_store.load_all()

    assert len(client_store.assets) == 1
    assert [c.name for c in client_store.collections] == ["Marketing Assets"]
    assert [t.name for t in client_store.tags] == ["Nature"]
    assert set(client_store.status.values()) == {ResourceStatus.LOADED}
    assert client_store.is_loading is False
    assert client_store.error is None


@pytest.mark.asyncio
async def test_set_filters_merges_and_refetches(client_store: ClientStore, create_asset):
    """Only the given filter fields change."""
    await create_asset(title="Mountain Landscape")
    await create_asset(
        title="Office",
        description="Open-plan workspace",
        tags=["Business"],
        fileName="office.jpg",
    )

    await client_store.set_filters(search="mountain")
    assert [a.title for a in client_store.assets] == ["Mountain Landscape"]
    assert client_store.filters.sort_by == "date"
    assert client_store.filters.sort_order == "desc"

    await client_store.set_filters(sort_by="name")
    assert client_store.filters == FilterState(search="mountain", sort_by="name")
    assert client_store.filters.sort_order == "desc"
    assert [a.title for a in client_store.assets] == ["Mountain Landscape"]

    await client_store.set_filters(search="", tags=["Business"])
    assert [a.title for a in client_store.assets] == ["Office"]
    assert client_store.filters.sort_by == "name"


def test_filter_query_params():
    filters = FilterState(search="sun", tags=["Nature", "Travel"], collection_id="c1")

    assert filters.to_query_params() == {
        "search": "sun",
        "tags": "Nature,Travel",
        "collectionId": "c1",
        "sortBy": "date",
        "sortOrder": "desc",
    }
    assert FilterState().to_query_params() == {"sortBy": "date", "sortOrder": "desc"}


@pytest.mark.asyncio
async def test_create_asset_refetches(client_store: ClientStore, sample_asset_data: dict):
    await client_store.create_asset(sample_asset_data)

    assert [a.title for a in client_store.assets] == [sample_asset_data["title"]]
    assert client_store.error is None


@pytest.mark.asyncio
async def test_failed_delete_keeps_data(client_store: ClientStore, create_asset):
    """A failed mutation sets the error and leaves loaded data alone."""
    await create_asset()
    await client_store.load_all()
    before = list(client_store.assets)

    await client_store.delete_asset("missing")

    assert client_store.error == "Asset not found"
    assert client_store.assets == before


@pytest.mark.asyncio
async def test_error_survives_later_success(client_store: ClientStore, create_asset):
    """Only clear_error() dismisses the error."""
    await create_asset()

    await client_store.delete_asset("missing")
    await client_store.fetch_assets()

    assert client_store.status["assets"] is ResourceStatus.LOADED
    assert client_store.error == "Asset not found"

    client_store.clear_error()
    assert client_store.error is None


@pytest.mark.asyncio
async def test_fetch_failure_marks_resource_errored(client: AsyncClient, create_asset):
    """A failed fetch keeps the last loaded list."""
    await create_asset()
    good = ClientStore(CatalogClient(http=client))
    await good.fetch_assets()

    good.client = CatalogClient(http=client, api_prefix="/missing")
    await good.fetch_assets()

    assert good.status["assets"] is ResourceStatus.ERRORED
    assert good.is_loading is False
    assert len(good.assets) == 1
    assert good.error


@pytest.mark.asyncio
async def test_update_asset_refreshes_selected_asset(client_store: ClientStore, create_asset):
    asset = await create_asset()
    await client_store.load_all()
    client_store.set_selected_asset(client_store.assets[0])

    await client_store.update_asset(asset["id"], {"title": "Renamed"})

    assert client_store.selected_asset.title == "Renamed"
    assert [a.title for a in client_store.assets] == ["Renamed"]


@pytest.mark.asyncio
async def test_delete_asset_clears_selected_asset(client_store: ClientStore, create_asset):
    asset = await create_asset()
    await client_store.load_all()
    client_store.set_selected_asset(client_store.assets[0])

    await client_store.delete_asset(asset["id"])

    assert client_store.selected_asset is None
    assert client_store.assets == []


@pytest.mark.asyncio
async def test_selection_survives_filter_change(client_store: ClientStore, create_asset):
    first = await create_asset()
    await create_asset(title="Second")
    await client_store.load_all()

    client_store.toggle_asset_selection(first["id"])
    await client_store.set_filters(search="nothing matches this")

    assert client_store.assets == []
    assert client_store.selected_assets == {first["id"]}


@pytest.mark.asyncio
async def test_bulk_delete_clears_selection(client_store: ClientStore, create_asset):
    first = await create_asset()
    second = await create_asset(title="Second")
    keep = await create_asset(title="Keep")
    await client_store.load_all()

    client_store.set_selected_assets([first["id"], second["id"]])
    await client_store.bulk_delete_assets()

    assert client_store.selected_assets == set()
    assert [a.id for a in client_store.assets] == [keep["id"]]


@pytest.mark.asyncio
async def test_bulk_update_uses_selection(client_store: ClientStore, create_asset):
    first = await create_asset()
    await create_asset(title="Second")
    await client_store.load_all()

    client_store.toggle_asset_selection(first["id"])
    await client_store.bulk_update_assets({"copyright": "© 2025 Studio"})

    copyrights = {a.id: a.copyright for a in client_store.assets}
    assert copyrights[first["id"]] == "© 2025 Studio"
    assert list(copyrights.values()).count("© 2025 Studio") == 1
    assert client_store.selected_assets == set()


@pytest.mark.asyncio
async def test_failed_bulk_update_keeps_selection(client_store: ClientStore, create_asset):
    first = await create_asset()
    await client_store.load_all()
    client_store.toggle_asset_selection(first["id"])

    await client_store.bulk_update_assets({"unknownField": 1})

    assert client_store.error
    assert client_store.selected_assets == {first["id"]}


@pytest.mark.asyncio
async def test_delete_collection_refetches_assets(
    client_store: ClientStore,
    create_collection,
    create_asset,
):
    collection = await create_collection()
    await create_asset(collectionId=collection["id"])
    await client_store.load_all()

    await client_store.delete_collection(collection["id"])

    assert client_store.collections == []
    assert client_store.assets[0].collection_id is None


@pytest.mark.asyncio
async def test_delete_tag_refetches_assets(client_store: ClientStore, create_asset):
    await create_asset(tags=["Nature", "Travel"])
    await client_store.create_tag("Travel")
    travel = client_store.tags[0]
    await client_store.fetch_assets()

    await client_store.delete_tag(travel.id)

    assert client_store.tags == []
    assert client_store.assets[0].tags == ["Nature"]


@pytest.mark.asyncio
async def test_duplicate_tag_sets_error(client_store: ClientStore):
    await client_store.create_tag("Nature")
    await client_store.create_tag("NATURE")

    assert client_store.error == "Tag already exists"
    assert [t.name for t in client_store.tags] == ["Nature"]


@pytest.mark.asyncio
async def test_collection_crud(client_store: ClientStore):
    await client_store.create_collection({"name": "Marketing Assets"})
    collection = client_store.collections[0]

    await client_store.update_collection(collection.id, {"description": "Campaigns"})

    assert client_store.collections[0].description == "Campaigns"
    assert client_store.collections[0].name == "Marketing Assets"


@pytest.mark.asyncio
async def test_api_error_carries_status(catalog_client: CatalogClient):
    with pytest.raises(CatalogAPIError) as exc_info:
        await catalog_client.assets.get_by_id("missing")

    assert exc_info.value.status_code == 404
    assert exc_info.value.error == "not_found"


@pytest.mark.asyncio
async def test_collection_detail(catalog_client: CatalogClient, create_collection, create_asset):
    collection = await create_collection()
    asset = await create_asset(collectionId=collection["id"])

    detail = await catalog_client.collections.get_by_id(collection["id"])

    assert detail.id == collection["id"]
    assert [a.id for a in detail.assets] == [asset["id"]]


@pytest.mark.asyncio
async def test_subscribe(client_store: ClientStore):
    seen = []
    unsubscribe = client_store.subscribe(lambda store: seen.append(store.view_mode))

    client_store.set_view_mode("list")
    unsubscribe()
    unsubscribe()
    client_store.set_view_mode("grid")

    assert seen == ["list"]
