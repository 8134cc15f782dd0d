"""
Python client for the Asset Catalog API.

CatalogClient wraps the REST resources; ClientStore keeps a local mirror
of server state that is re-synchronized after every mutation.
"""

from app.client.api import CatalogAPIError, CatalogClient
from app.client.state import FilterState, ResourceStatus
from app.client.store import ClientStore

__all__ = [
    "CatalogAPIError",
    "CatalogClient",
    "ClientStore",
    "FilterState",
    "ResourceStatus",
]
