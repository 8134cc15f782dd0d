"""
Document store factory.
Provides configuration-driven backend selection.
"""

from functools import lru_cache

from app.config import get_settings
from app.storage.base import DocumentStore
from app.storage.local import JsonFileStore
from app.storage.memory import MemoryDocumentStore

settings = get_settings()


@lru_cache
def get_document_store() -> DocumentStore:
    """
    Get the configured document store.

    Uses LRU cache to ensure only one instance is created.
    Backend selection is based on the STORE_BACKEND setting.

    Raises:
        ValueError: If an unknown store backend is configured
    """
    backend = settings.STORE_BACKEND.lower()

    if backend == "file":
        return JsonFileStore()
    elif backend == "memory":
        return MemoryDocumentStore()
    else:
        raise ValueError(f"Unknown store backend: {backend}")
