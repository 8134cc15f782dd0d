"""
Client-side state types: filter settings, view mode and resource status.
"""

import enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ViewMode = Literal["grid", "list"]
SortBy = Literal["name", "date", "size"]
SortOrder = Literal["asc", "desc"]


class ResourceStatus(str, enum.Enum):
    """Load state of one mirrored resource list."""
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


class FilterState(BaseModel):
    """The filter settings the client applies to the asset list."""

    search: str = ""
    tags: list[str] = Field(default_factory=list)
    collection_id: str | None = None
    sort_by: SortBy = "date"
    sort_order: SortOrder = "desc"

    model_config = ConfigDict(extra="forbid")

    def merged(self, **changes) -> "FilterState":
        """Copy with some fields replaced; the rest are kept."""
        return FilterState.model_validate({**self.model_dump(), **changes})

    def to_query_params(self) -> dict[str, str]:
        """Query string for GET /assets; empty filters are left out."""
        params = {}
        if self.search:
            params["search"] = self.search
        if self.tags:
            params["tags"] = ",".join(self.tags)
        if self.collection_id:
            params["collectionId"] = self.collection_id
        if self.sort_by:
            params["sortBy"] = self.sort_by
        if self.sort_order:
            params["sortOrder"] = self.sort_order
        return params
