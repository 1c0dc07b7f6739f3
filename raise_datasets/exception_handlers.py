"""Map marketplace failures onto gateway-style JSON error responses.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "machine_readable_error_code"
    }

``upstream_error`` responses also carry ``upstream_status`` and ``body``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from raise_datasets.exceptions import (
    DatasetsAppError,
    InvalidUpstreamPayload,
    UpstreamError,
    UpstreamUnreachable,
)

logger = logging.getLogger(__name__)


def _create_error_response(status_code: int, message: str, code: str, **extra) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={"detail": message, "code": code, **extra},
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the marketplace exception handlers on ``app``."""

    @app.exception_handler(UpstreamUnreachable)
    async def upstream_unreachable_handler(request: Request, exc: UpstreamUnreachable) -> JSONResponse:
        logger.error("Marketplace unreachable on %s %s: %s", request.method, request.url.path, exc)
        return _create_error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Unable to reach the RAISE marketplace API.",
            "upstream_unreachable",
        )

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error(
            "Marketplace returned %s on %s %s",
            exc.status_code,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status.HTTP_502_BAD_GATEWAY,
            "Unexpected response from the RAISE marketplace API.",
            "upstream_error",
            upstream_status=exc.status_code,
            body=exc.response_text,
        )

    @app.exception_handler(InvalidUpstreamPayload)
    async def invalid_payload_handler(request: Request, exc: InvalidUpstreamPayload) -> JSONResponse:
        logger.warning("Invalid marketplace payload on %s %s: %s", request.method, request.url.path, exc)
        return _create_error_response(
            status.HTTP_502_BAD_GATEWAY,
            "The data returned by the RAISE marketplace API is not valid JSON.",
            "invalid_upstream_payload",
        )

    @app.exception_handler(DatasetsAppError)
    async def app_error_handler(request: Request, exc: DatasetsAppError) -> JSONResponse:
        logger.error("Application error on %s %s: %s", request.method, request.url.path, exc)
        return _create_error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc),
            "internal_error",
        )
