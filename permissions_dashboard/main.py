"""Main FastAPI application entry point."""

import asyncio
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from permissions_dashboard.config import Settings, get_settings
from permissions_dashboard.core.app_factory import create_app
from permissions_dashboard.logging_config import setup_logging
from permissions_dashboard.server import start_server, stop_server

# Load environment variables from .env file
load_dotenv(Path.cwd() / ".env")

settings = get_settings()

# Configure structured logging (console, plus JSON file when LOG_FILE is set)
setup_logging(settings.log_level, settings.log_file)

# Create application
app = create_app(settings)


async def serve(app: FastAPI, settings: Settings) -> None:
    """Serve until the server exits or the task is cancelled, then shut down gracefully."""
    handle = await start_server(app, settings.dashboard_host, settings.dashboard_port, settings.log_level)
    try:
        await handle.wait()
    finally:
        await stop_server(handle, timeout=settings.shutdown_timeout)


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(serve(app, settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
