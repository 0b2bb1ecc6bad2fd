"""Template rendering utilities for HTML views."""

from pathlib import Path

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from permissions_dashboard.exceptions import TemplateRenderException
from permissions_dashboard.models import DashboardArgs, ViewModel

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"
templates = Jinja2Templates(directory=TEMPLATES_DIR)


class TemplateRenderer:
    """Handles rendering of Jinja2 templates for the dashboard."""

    @staticmethod
    def render_dashboard(
        request: Request,
        view: ViewModel,
        args: DashboardArgs,
        analytics_tag: str | None = None,
    ) -> HTMLResponse:
        """Render the dashboard page.

        Args:
            request: FastAPI request object
            view: View model resolved for this request
            args: Display values for the example commands
            analytics_tag: Google Analytics tag id, or None to omit the snippet

        Returns:
            HTMLResponse with the rendered page

        Raises:
            TemplateRenderException: If the template cannot be loaded or rendered
        """
        try:
            return templates.TemplateResponse(
                request,
                "index.html",
                {
                    "view": view,
                    "args": args,
                    "analytics_tag": analytics_tag,
                },
            )
        except TemplateError as e:
            raise TemplateRenderException(
                details={"template": "index.html", "error": str(e), "error_type": type(e).__name__}
            ) from e
