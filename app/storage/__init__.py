"""
Persistence layer for the catalog document.
Supports a JSON file on disk and a process-local memory store.
"""

from app.storage.base import DocumentStore
from app.storage.local import JsonFileStore
from app.storage.memory import MemoryDocumentStore
from app.storage.factory import get_document_store

__all__ = [
    "DocumentStore",
    "JsonFileStore",
    "MemoryDocumentStore",
    "get_document_store",
]
