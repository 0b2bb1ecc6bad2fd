"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from permissions_dashboard.models import DashboardArgs
from permissions_dashboard.services.view_resolver import ViewResolver


async def get_view_resolver(request: Request) -> ViewResolver:
    """
    Get the view resolver from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared ViewResolver instance.

    Raises:
        RuntimeError: If the view resolver is not initialized.
    """
    resolver: ViewResolver | None = getattr(request.app.state, "view_resolver", None)

    if resolver is None:
        raise RuntimeError("View resolver not initialized. Is the app running inside its lifespan?")

    return resolver


async def get_dashboard_args(request: Request) -> DashboardArgs:
    """Get the display values for the example commands from app state."""
    return request.app.state.dashboard_args
