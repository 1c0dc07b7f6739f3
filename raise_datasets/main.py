"""FastAPI application for the RAISE dataset listing.

Routes
------
GET /api/datasets?search=<text>&page=<n>&per_page=<n>
GET /health

Run with::

    uvicorn raise_datasets.main:app
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any, AsyncIterator

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware

from raise_datasets.config import Settings, get_settings
from raise_datasets.datasets import normalize_query
from raise_datasets.dependencies import (
    build_dataset_service,
    build_http_client,
    get_dataset_service,
)
from raise_datasets.exception_handlers import setup_exception_handlers
from raise_datasets.middleware.request_logging import RequestLoggingMiddleware
from raise_datasets.services import DatasetService
from raise_datasets.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the dataset service on startup unless one was injected."""
    if getattr(app.state, "dataset_service", None) is not None:
        yield
        return

    settings: Settings = app.state.settings
    http_client = build_http_client(settings)
    app.state.dataset_service = build_dataset_service(settings, http_client)
    logger.info(f"Dataset service ready (endpoint={settings.marketplace_endpoint})")
    try:
        yield
    finally:
        app.state.dataset_service = None
        await http_client.aclose()


def create_app(
    settings: Settings | None = None,
    dataset_service: DatasetService | None = None,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    settings = settings or get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Paginated, searchable listing of RAISE marketplace datasets",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.dataset_service = dataset_service

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        service = app.state.dataset_service
        return {
            "status": "ok",
            "service": "raise-datasets",
            "version": settings.app_version,
            "cache": service.cache.backend_name() if service is not None else None,
            "cache_entries": len(service.cache) if service is not None else 0,
        }

    @app.get("/api/datasets")
    async def list_datasets(
        service: Annotated[DatasetService, Depends(get_dataset_service)],
        search: Annotated[str | None, Query(description="Search text")] = "",
        page: Annotated[str | None, Query(description="1-based page number")] = "1",
        per_page: Annotated[str | None, Query(description="Items per page (1-50)")] = None,
    ) -> dict[str, Any]:
        """List datasets. Out-of-range or malformed paging values are clamped."""
        query = normalize_query(
            search,
            page,
            per_page,
            default_per_page=settings.default_per_page,
            max_per_page=settings.max_per_page,
        )
        result = await service.fetch(query)
        return result.to_response()

    return app


# Module-level instance used by uvicorn:
#   uvicorn raise_datasets.main:app --reload
app = create_app()
