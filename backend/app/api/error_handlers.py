"""Error Handlers — global exception handlers for the SiteList API.

Invariants:
    - SiteListError → HTTP 500, text/plain body = the error message
    - Exception (catch-all) → HTTP 500 with a generic message, never internal details
    - Each error is logged once, here, with code, method, and path
    - Error responses carry the same allow-all CORS header as successes

Design Decisions:
    - Two-layer handler: domain (SiteListError), catch-all (Exception)
    - Plain text, no error envelope: clients read the message verbatim
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from app.api.cors import ALLOW_ALL_ORIGINS
from app.core.errors import SiteListError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_site_list_error_handler(app)
    _register_generic_error_handler(app)


def _register_site_list_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SiteListError)
    async def site_list_error_handler(request: Request, exc: SiteListError):
        """Handle all SiteList request and storage errors."""
        logger.error(
            f"site error: {exc.message}",
            extra={
                **exc.log_extra(),
                "method": request.method,
                "path": request.url.path,
            },
        )
        return PlainTextResponse(
            exc.to_response(),
            status_code=exc.http_status,
            headers=ALLOW_ALL_ORIGINS,
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"method": request.method, "path": request.url.path},
        )
        return PlainTextResponse(
            "internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=ALLOW_ALL_ORIGINS,
        )
