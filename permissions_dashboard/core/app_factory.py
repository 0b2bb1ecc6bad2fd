"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from permissions_dashboard import __version__
from permissions_dashboard.config import Settings, get_settings
from permissions_dashboard.core.lifespan import lifespan
from permissions_dashboard.core.middleware import setup_middleware
from permissions_dashboard.datastore import Datastore
from permissions_dashboard.middleware.error_handlers import register_error_handlers
from permissions_dashboard.protocols import SourceGeneratorProtocol
from permissions_dashboard.routers import dashboard_router


def create_app(
    settings: Settings | None = None,
    datastore: Datastore | None = None,
    generator: SourceGeneratorProtocol | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Settings to use, defaults to the process-wide instance
        datastore: Store to read from, defaults to one built from settings at startup
        generator: Schema source generator, defaults to SchemaSourceGenerator

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    # The dashboard page is the only route: no docs, no OpenAPI schema
    app = FastAPI(
        title="Permissions Dashboard",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.settings = settings
    app.state.dashboard_args = settings.dashboard_args
    app.state.datastore = datastore
    app.state.source_generator = generator
    app.state.view_resolver = None

    setup_middleware(app)
    register_error_handlers(app)

    app.include_router(dashboard_router.router, tags=["dashboard"])

    return app
