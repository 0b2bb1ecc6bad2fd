"""Custom exceptions for the permissions dashboard with HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error logging."""

    # Generic errors
    DASHBOARD_ERROR = "DASHBOARD_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Store errors
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    STORE_QUERY_FAILED = "STORE_QUERY_FAILED"
    DATASTORE_ERROR = "DATASTORE_ERROR"

    # Schema errors
    SOURCE_GENERATION_FAILED = "SOURCE_GENERATION_FAILED"

    # Rendering errors
    TEMPLATE_ERROR = "TEMPLATE_ERROR"

    # Configuration errors
    CONFIG_ERROR = "CONFIG_ERROR"


class DashboardException(Exception):
    """Base exception for dashboard errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DASHBOARD_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize dashboard exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class StoreUnavailableException(DashboardException):
    """The store readiness check failed."""

    def __init__(self, message: str = "Datastore readiness check failed", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.STORE_UNAVAILABLE,
            status_code=503,
            details=details,
        )


class StoreQueryFailedException(DashboardException):
    """Listing namespace definitions failed."""

    def __init__(self, message: str = "Failed to list namespace definitions", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.STORE_QUERY_FAILED,
            status_code=502,
            details=details,
        )


class DatastoreException(DashboardException):
    """A concrete store could not read its backing data."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.DATASTORE_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)


class SourceGenerationFailedException(DashboardException):
    """A namespace definition could not be printed as schema source."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SOURCE_GENERATION_FAILED,
            status_code=500,
            details=details,
        )


class TemplateRenderException(DashboardException):
    """The page template failed to load or render."""

    def __init__(self, message: str = "Failed to render dashboard template", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.TEMPLATE_ERROR,
            status_code=500,
            details=details,
        )


class ConfigurationException(DashboardException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
