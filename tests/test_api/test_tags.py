"""
Tests for tag endpoints.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_tags_empty(client: AsyncClient):
    """Test listing tags when the catalog is empty."""
    response = await client.get("/api/tags")

    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_create_tag(client: AsyncClient):
    response = await client.post("/api/tags", json={"name": "  Nature "})

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["name"] == "Nature"

    listed = (await client.get("/api/tags")).json()
    assert listed == [data]


@pytest.mark.asyncio
async def test_create_duplicate_tag_ignores_case(client: AsyncClient, create_tag):
    """Tag names are unique regardless of case."""
    await create_tag("Nature")

    response = await client.post("/api/tags", json={"name": "nature"})

    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "validation_failed"
    assert data["message"] == "Tag already exists"
    assert len((await client.get("/api/tags")).json()) == 1


@pytest.mark.asyncio
async def test_create_tag_rejects_blank_name(client: AsyncClient):
    response = await client.post("/api/tags", json={"name": "   "})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_create_tag_requires_name(client: AsyncClient):
    response = await client.post("/api/tags", json={})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_asset_tags_need_not_exist(client: AsyncClient, create_asset):
    """Asset tags are free text and do not create tag records."""
    asset = await create_asset(tags=["Unlisted"])

    assert asset["tags"] == ["Unlisted"]
    assert (await client.get("/api/tags")).json() == []


@pytest.mark.asyncio
async def test_delete_tag_detaches_from_assets(client: AsyncClient, create_tag, create_asset):
    """Deleting a tag removes its name from every asset that carries it."""
    travel = await create_tag("Travel")
    await create_tag("Nature")
    tagged = await create_asset(tags=["Nature", "Travel"])
    untouched = await create_asset(title="Forest", tags=["Nature"])

    before = (await client.get("/api/assets", params={"tags": "Travel"})).json()
    assert [a["id"] for a in before] == [tagged["id"]]

    response = await client.delete(f"/api/tags/{travel['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Tag deleted successfully"}

    after = (await client.get("/api/assets", params={"tags": "Travel"})).json()
    assert after == []

    asset = (await client.get(f"/api/assets/{tagged['id']}")).json()
    assert asset["tags"] == ["Nature"]
    assert asset["updatedAt"] >= tagged["updatedAt"]

    other = (await client.get(f"/api/assets/{untouched['id']}")).json()
    assert other == untouched

    assert [t["name"] for t in (await client.get("/api/tags")).json()] == ["Nature"]


@pytest.mark.asyncio
async def test_delete_tag_not_found(client: AsyncClient):
    response = await client.delete("/api/tags/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Tag not found"
