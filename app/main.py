"""
Asset Catalog API - Main Application Entry Point.

FastAPI application serving the asset, collection and tag catalog.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.api.router import api_router
from app.config import get_settings
from app.core.exceptions import CatalogAPIException
from app.core.responses import create_error_response, validation_error_details
from app.db.repository import get_repository

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.
    Loads the catalog document on startup.
    """
    # Startup
    logger.info(f"Starting {settings.PROJECT_NAME}")
    logger.info(f"Store backend: {settings.STORE_BACKEND}")
    logger.info(f"Debug mode: {settings.DEBUG}")

    await get_repository().load(seed=settings.SEED_SAMPLE_DATA)

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    description="""
## Asset Catalog API

REST API for a digital asset library of images.

### Features
- **Assets**: create, edit, delete; search, filter by tags or collection, sort by name, date or size
- **Bulk operations**: apply one edit to, or delete, many assets at once
- **Collections**: group assets; deleting a collection keeps its assets
- **Tags**: case-insensitively unique labels; deleting a tag removes it from every asset
    """,
    version=__version__,
    openapi_tags=[
        {"name": "assets", "description": "Asset catalog operations"},
        {"name": "collections", "description": "Collection management"},
        {"name": "tags", "description": "Tag management"},
        {"name": "health", "description": "Service health checks"},
    ],
    lifespan=lifespan,
)

# CORS middleware for the browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CatalogAPIException)
async def catalog_exception_handler(request: Request, exc: CatalogAPIException) -> JSONResponse:
    """
    Global exception handler for catalog API exceptions.
    Returns standardized error responses.
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body and query validation failures are reported as 400."""
    return create_error_response(
        error="validation_failed",
        message="Request validation failed",
        status_code=400,
        details=validation_error_details(exc),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all exception handler for unexpected errors.
    Logs the full error and echoes its message to the caller.
    """
    logger.exception(f"Unexpected error: {exc}")
    return create_error_response(
        error="internal_error",
        message=str(exc) or "An unexpected error occurred",
        status_code=500,
    )


# Include API routers
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint with service information."""
    return {
        "name": settings.PROJECT_NAME,
        "version": __version__,
        "docs": "/docs",
        "openapi": "/openapi.json",
        "api": settings.API_PREFIX,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.DEBUG,
    )
