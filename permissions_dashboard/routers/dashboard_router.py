"""Dashboard page route."""

import asyncio

from fastapi import APIRouter, Request, Response

from permissions_dashboard.dependencies import get_dashboard_args, get_view_resolver
from permissions_dashboard.logging_config import get_logger, log_with_context
from permissions_dashboard.models import ViewModel
from permissions_dashboard.services.view_resolver import ViewResolver
from permissions_dashboard.views.template_renderer import TemplateRenderer

logger = get_logger(__name__)

router = APIRouter()

# Logged for requests whose client went away before the page was ready
CLIENT_CLOSED_REQUEST = 499


async def wait_for_disconnect(request: Request) -> None:
    """Return once the client has closed the connection."""
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


async def resolve_until_disconnect(request: Request, resolver: ViewResolver) -> ViewModel | None:
    """Resolve the view, cancelling the store calls if the client disconnects first.

    Args:
        request: Incoming request, watched for `http.disconnect`
        resolver: Shared view resolver

    Returns:
        The resolved view, or None if the client disconnected first

    Raises:
        DashboardException: Whatever the resolver raises
    """
    resolve_task = asyncio.create_task(resolver.resolve())
    disconnect_task = asyncio.create_task(wait_for_disconnect(request))
    try:
        await asyncio.wait({resolve_task, disconnect_task}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        disconnect_task.cancel()
        if not resolve_task.done():
            resolve_task.cancel()
            await asyncio.wait({resolve_task})

    if resolve_task.cancelled():
        return None
    return resolve_task.result()


async def dashboard(request: Request) -> Response:
    """Render the dashboard for the store's current state.

    Every method is answered the same way; the page is read-only.
    """
    resolver = await get_view_resolver(request)
    args = await get_dashboard_args(request)

    view = await resolve_until_disconnect(request, resolver)
    if view is None:
        log_with_context(
            logger,
            "info",
            "Client disconnected before the dashboard was resolved",
            method=request.method,
            path=request.url.path,
            event_type="client_disconnected",
        )
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    return TemplateRenderer.render_dashboard(request, view, args, request.app.state.settings.analytics_tag)


# An empty method set matches every request method
router.add_route("/", dashboard, methods=[])
