"""
Local filesystem document store.
Keeps the catalog document as a single pretty-printed JSON file.
"""

import json
from pathlib import Path
from typing import Any

import aiofiles
import aiofiles.os

from app.config import get_settings
from app.core.exceptions import StorageException
from app.storage.base import DocumentStore

settings = get_settings()


class JsonFileStore(DocumentStore):
    """
    JSON file implementation.

    The document is written to a temporary sibling file first and then
    moved over the target, so a failed write never truncates the last
    good copy.
    """

    def __init__(self, path: str | None = None):
        """
        Initialize the file store.

        Args:
            path: Location of the JSON file. Defaults to settings.DATA_FILE
        """
        self.path = Path(path or settings.DATA_FILE)

    async def load(self) -> dict[str, Any] | None:
        """Read and decode the JSON file, or None if it does not exist."""
        if not await aiofiles.os.path.exists(self.path):
            return None

        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                return json.loads(await f.read())
        except (OSError, ValueError) as e:
            raise StorageException(
                message=f"Failed to read catalog document: {str(e)}",
                details={"path": str(self.path)},
            )

    async def save(self, document: dict[str, Any]) -> None:
        """Write the whole document, replacing the previous file."""
        tmp_path = self.path.with_name(self.path.name + ".tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                await f.write(json.dumps(document, indent=2))

            await aiofiles.os.replace(tmp_path, self.path)

        except OSError as e:
            raise StorageException(
                message=f"Failed to write catalog document: {str(e)}",
                details={"path": str(self.path)},
            )

    def describe(self) -> str:
        return f"file:{self.path}"
