"""
Health endpoint.
Reports the document store in use and record counts.
"""

from fastapi import APIRouter

from app.dependencies import AppSettings, Repo

router = APIRouter()


@router.get("/health")
async def health_check(repo: Repo, settings: AppSettings):
    """
    Service health check endpoint.

    A catalog whose stored document could not be loaded reports
    "read_only" and refuses mutations.

    Returns:
        {"status": "ok", "service": "...", "store": "...", "counts": {...}}
    """
    return {
        "status": "ok" if repo.load_error is None else "read_only",
        "service": settings.PROJECT_NAME,
        "store": repo.store.describe(),
        "counts": {
            "assets": len(repo.assets),
            "collections": len(repo.collections),
            "tags": len(repo.tags),
        },
    }
