"""
In-memory document store.
Used for tests and for running the API without touching disk.
"""

import copy
from typing import Any

from app.storage.base import DocumentStore


class MemoryDocumentStore(DocumentStore):
    """Keeps a deep copy of the last saved document in process memory."""

    def __init__(self, document: dict[str, Any] | None = None):
        self._document = copy.deepcopy(document)
        self.save_count = 0

    async def load(self) -> dict[str, Any] | None:
        return copy.deepcopy(self._document)

    async def save(self, document: dict[str, Any]) -> None:
        self._document = copy.deepcopy(document)
        self.save_count += 1

    @property
    def document(self) -> dict[str, Any] | None:
        """The last saved document, as written."""
        return self._document

    def describe(self) -> str:
        return "memory"
