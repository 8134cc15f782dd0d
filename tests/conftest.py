"""
Pytest configuration and fixtures for Asset Catalog API tests.
"""

import os

# Settings are read at import time; keep tests off the real data file.
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("SEED_SAMPLE_DATA", "false")

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.client import CatalogClient, ClientStore
from app.db.repository import Repository, get_repository
from app.main import app
from app.storage import MemoryDocumentStore


@pytest.fixture
def store() -> MemoryDocumentStore:
    """Empty in-memory document store."""
    return MemoryDocumentStore()


@pytest_asyncio.fixture(scope="function")
async def repository(store: MemoryDocumentStore) -> Repository:
    """Repository loaded from the empty test store."""
    repo = Repository(store)
    await repo.load()
    return repo


@pytest_asyncio.fixture(scope="function")
async def client(repository: Repository) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    app.dependency_overrides[get_repository] = lambda: repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def catalog_client(client: AsyncClient) -> CatalogClient:
    """API client bound to the test app."""
    return CatalogClient(http=client)


@pytest.fixture
def client_store(catalog_client: CatalogClient) -> ClientStore:
    return ClientStore(catalog_client)


@pytest.fixture
def sample_asset_data() -> dict[str, Any]:
    """Sample asset payload for testing."""
    return {
        "title": "Mountain Landscape",
        "description": "Beautiful mountain landscape at sunset",
        "tags": ["Nature", "Travel"],
        "fileName": "mountain.jpg",
        "fileSize": 2_457_600,
        "dimensions": {"width": 1920, "height": 1080},
        "format": "JPEG",
        "imageUrl": "https://picsum.photos/id/1018/1920/1080",
        "copyright": "Free to use",
        "usageRights": "Commercial use allowed",
        "collectionId": None,
    }


@pytest.fixture
def create_asset(
    client: AsyncClient,
    sample_asset_data: dict[str, Any],
) -> Callable[..., Awaitable[dict[str, Any]]]:
    """Factory that POSTs an asset built from the sample payload plus overrides."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        response = await client.post("/api/assets", json={**sample_asset_data, **overrides})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_collection(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(name: str = "Marketing Assets", description: str = "") -> dict[str, Any]:
        response = await client.post(
            "/api/collections",
            json={"name": name, "description": description},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_tag(client: AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(name: str) -> dict[str, Any]:
        response = await client.post("/api/tags", json={"name": name})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
