"""Application lifespan management."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from permissions_dashboard import __version__
from permissions_dashboard.datastore import build_datastore
from permissions_dashboard.logging_config import get_logger, log_with_context
from permissions_dashboard.services.schema_generator import SchemaSourceGenerator
from permissions_dashboard.services.view_resolver import ViewResolver

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Uses the datastore and generator injected through create_app when
    present, otherwise builds them from settings. Exceptions after yield are
    logged and re-raised so cleanup still runs.
    """
    settings = app.state.settings

    log_with_context(
        logger,
        "info",
        "Starting permissions dashboard",
        version=__version__,
        datastore_engine=settings.datastore_engine,
        event_type="app_startup",
    )

    datastore = app.state.datastore or build_datastore(settings)
    generator = app.state.source_generator or SchemaSourceGenerator()

    await datastore.initialize()
    app.state.datastore = datastore
    app.state.view_resolver = ViewResolver(datastore, generator)
    log_with_context(
        logger,
        "info",
        "Datastore initialized",
        datastore=type(datastore).__name__,
        event_type="datastore_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down permissions dashboard",
            event_type="app_shutdown",
        )
        app.state.view_resolver = None
        await datastore.close()
        log_with_context(
            logger,
            "info",
            "Datastore closed",
            event_type="datastore_cleanup",
        )
