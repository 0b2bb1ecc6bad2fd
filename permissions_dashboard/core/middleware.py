"""Middleware configuration."""

import time

from fastapi import FastAPI, Request

from permissions_dashboard.logging_config import get_logger, log_with_context
from permissions_dashboard.middleware.error_handlers import UNHANDLED_ERROR_STATUS, error_status

logger = get_logger(__name__)


def _log_request(request: Request, status_code: int, started: float, **extra_fields) -> None:
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        path=request.url.path,
        status_code=status_code,
        duration_ms=round((time.perf_counter() - started) * 1000, 2),
        event_type="http_request",
        **extra_fields,
    )


def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and duration of every request.

        Unhandled errors are answered by the outermost error handler after
        this middleware has exited, so their request line is logged here
        with the status that handler sends.
        """
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            _log_request(
                request,
                error_status(request, UNHANDLED_ERROR_STATUS),
                started,
                error_type=type(e).__name__,
            )
            raise
        _log_request(request, response.status_code, started)
        return response
