"""
Abstract document store interface.
Defines the contract for persisting the catalog document.
"""

from abc import ABC, abstractmethod
from typing import Any


class DocumentStore(ABC):
    """
    Abstract base class for document stores.

    A store holds exactly one JSON document with the top-level keys
    ``assets``, ``collections`` and ``tags``. It is always read and
    written whole; there is no partial update.
    """

    @abstractmethod
    async def load(self) -> dict[str, Any] | None:
        """
        Read the stored document.

        Returns:
            The decoded document, or None if nothing has been saved yet

        Raises:
            StorageException: If the document exists but cannot be read
        """
        pass

    @abstractmethod
    async def save(self, document: dict[str, Any]) -> None:
        """
        Replace the stored document.

        Args:
            document: JSON-serializable catalog document

        Raises:
            StorageException: If the write fails
        """
        pass

    @abstractmethod
    def describe(self) -> str:
        """Short human-readable description used in logs and health checks."""
        pass
