"""Exception handlers for the application.

Every failure is answered with the same opaque plain-text body. The status is
200 unless ERROR_STATUS_PASSTHROUGH is enabled.
"""

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from permissions_dashboard.exceptions import DashboardException
from permissions_dashboard.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

ERROR_BODY = "Internal Error"
COMPAT_ERROR_STATUS = 200
UNHANDLED_ERROR_STATUS = 500


def error_status(request: Request, status_code: int) -> int:
    """Status sent to the client for an error that carries `status_code`."""
    settings = getattr(request.app.state, "settings", None)
    if settings is not None and settings.error_status_passthrough:
        return status_code
    return COMPAT_ERROR_STATUS


def _error_response(request: Request, status_code: int) -> PlainTextResponse:
    return PlainTextResponse(ERROR_BODY, status_code=error_status(request, status_code))


async def dashboard_exception_handler(request: Request, exc: DashboardException) -> PlainTextResponse:
    """Handle custom dashboard exceptions.

    The error code, message and details are logged for the operator;
    nothing beyond the opaque body reaches the client.
    """
    log_with_context(
        logger,
        "error",
        "Dashboard error",
        error_code=exc.code.value,
        error_message=exc.message,
        details=exc.details,
        status_code=exc.status_code,
        method=request.method,
        url=str(request.url),
        event_type="dashboard_error",
    )
    return _error_response(request, exc.status_code)


async def general_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle general exceptions with logging."""
    log_with_context(
        logger,
        "error",
        "Unhandled exception",
        error=str(exc),
        error_type=type(exc).__name__,
        method=request.method,
        url=str(request.url),
        event_type="unhandled_error",
    )
    # Also log the traceback separately for debugging
    logger.error("Exception traceback:", exc_info=exc)

    # Don't expose internal error details to clients
    return _error_response(request, UNHANDLED_ERROR_STATUS)


def register_error_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DashboardException, dashboard_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
