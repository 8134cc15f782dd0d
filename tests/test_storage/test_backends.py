"""
Tests for document store backends.
"""

import json
from pathlib import Path

import pytest

from app.core.exceptions import StorageException
from app.storage.local import JsonFileStore
from app.storage.memory import MemoryDocumentStore

DOCUMENT = {
    "assets": [{"id": "a1", "title": "Mountain Landscape", "tags": ["Nature"]}],
    "collections": [],
    "tags": [{"id": "t1", "name": "Nature"}],
}


class TestJsonFileStore:
    """Tests for the JSON file store."""

    @pytest.fixture
    def path(self, tmp_path) -> Path:
        return tmp_path / "data" / "catalog.json"

    @pytest.fixture
    def storage(self, path: Path) -> JsonFileStore:
        """Create a file store under a temporary directory."""
        return JsonFileStore(path=str(path))

    @pytest.mark.asyncio
    async def test_load_missing_file(self, storage: JsonFileStore):
        """Nothing saved yet reads as None."""
        assert await storage.load() is None

    @pytest.mark.asyncio
    async def test_save_and_load(self, storage: JsonFileStore, path: Path):
        """Test a saved document reads back unchanged."""
        await storage.save(DOCUMENT)

        assert path.exists()
        assert await storage.load() == DOCUMENT

    @pytest.mark.asyncio
    async def test_save_replaces_whole_document(self, storage: JsonFileStore):
        await storage.save(DOCUMENT)
        await storage.save({"assets": [], "collections": [], "tags": []})

        assert await storage.load() == {"assets": [], "collections": [], "tags": []}

    @pytest.mark.asyncio
    async def test_save_leaves_no_temp_file(self, storage: JsonFileStore, path: Path):
        await storage.save(DOCUMENT)

        assert [p.name for p in path.parent.iterdir()] == ["catalog.json"]

    @pytest.mark.asyncio
    async def test_file_is_pretty_printed(self, storage: JsonFileStore, path: Path):
        await storage.save(DOCUMENT)

        text = path.read_text(encoding="utf-8")
        assert text == json.dumps(DOCUMENT, indent=2)

    @pytest.mark.asyncio
    async def test_load_corrupt_file(self, storage: JsonFileStore, path: Path):
        """Test unreadable JSON raises StorageException."""
        path.parent.mkdir(parents=True)
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(StorageException) as exc_info:
            await storage.load()

        assert exc_info.value.status_code == 500
        assert exc_info.value.details == {"path": str(path)}

    @pytest.mark.asyncio
    async def test_save_into_unwritable_location(self, tmp_path: Path):
        """A path whose parent is a file cannot be written."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        storage = JsonFileStore(path=str(blocker / "catalog.json"))

        with pytest.raises(StorageException):
            await storage.save(DOCUMENT)

    def test_describe(self, storage: JsonFileStore, path: Path):
        assert storage.describe() == f"file:{path}"


class TestMemoryDocumentStore:
    """Tests for the in-memory store."""

    @pytest.mark.asyncio
    async def test_empty_store(self):
        store = MemoryDocumentStore()

        assert await store.load() is None
        assert store.save_count == 0

    @pytest.mark.asyncio
    async def test_save_copies_document(self):
        """Later changes to the caller's dict do not leak into the store."""
        store = MemoryDocumentStore()
        document = json.loads(json.dumps(DOCUMENT))

        await store.save(document)
        document["assets"].clear()

        assert await store.load() == DOCUMENT
        assert store.save_count == 1

    @pytest.mark.asyncio
    async def test_load_returns_copy(self):
        store = MemoryDocumentStore(DOCUMENT)

        loaded = await store.load()
        loaded["tags"].append({"id": "t2", "name": "Travel"})

        assert store.document == DOCUMENT
