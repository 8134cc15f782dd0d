"""Record storage for the Asset Catalog API."""

from app.db.base import Base, new_id, utcnow

__all__ = ["Base", "new_id", "utcnow"]
