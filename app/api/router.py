"""
API Router - Aggregates all endpoints.
Base Path: /api
"""

from fastapi import APIRouter

from app.api.routes import assets, collections, health, tags
from app.schemas.error import ErrorResponse, ValidationErrorResponse

# Error bodies shared by every resource router, for the OpenAPI schema
ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse, "description": "Validation failed"},
    404: {"model": ErrorResponse, "description": "Record not found"},
    500: {"model": ErrorResponse, "description": "Storage or unexpected error"},
}

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(assets.router, prefix="/assets", tags=["assets"], responses=ERROR_RESPONSES)
api_router.include_router(
    collections.router,
    prefix="/collections",
    tags=["collections"],
    responses=ERROR_RESPONSES,
)
api_router.include_router(tags.router, prefix="/tags", tags=["tags"], responses=ERROR_RESPONSES)
