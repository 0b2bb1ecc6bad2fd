"""HTTP server lifecycle.

start_server returns a ServerHandle owning the running uvicorn server;
the same handle is passed to stop_server. There is no module-level server.
"""

import asyncio
from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI

from permissions_dashboard.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

STARTUP_POLL_INTERVAL = 0.05


class ServerStartupError(RuntimeError):
    """The server exited before it started listening."""


@dataclass
class ServerHandle:
    """A running dashboard server."""

    server: uvicorn.Server
    task: asyncio.Task
    host: str
    port: int

    async def wait(self) -> None:
        """Block until the server shuts down, re-raising a fatal serve error."""
        await self.task


async def start_server(app: FastAPI, host: str, port: int, log_level: str = "info") -> ServerHandle:
    """Start serving `app` and return once the socket is listening.

    Args:
        app: Application to serve
        host: Bind host
        port: Bind port, 0 picks a free port
        log_level: uvicorn log level

    Returns:
        Handle for the running server

    Raises:
        ServerStartupError: If the server stops before it starts listening
    """
    config = uvicorn.Config(app, host=host, port=port, log_level=log_level.lower(), log_config=None)
    server = uvicorn.Server(config)
    task = asyncio.create_task(server.serve())

    while not server.started:
        if task.done():
            # Surfaces an exception raised by serve(), if any
            task.result()
            raise ServerStartupError(f"Dashboard server on {host}:{port} exited during startup")
        await asyncio.sleep(STARTUP_POLL_INTERVAL)

    bound_port = port
    if server.servers and server.servers[0].sockets:
        bound_port = server.servers[0].sockets[0].getsockname()[1]

    log_with_context(
        logger,
        "info",
        "Dashboard server listening",
        host=host,
        port=bound_port,
        event_type="server_started",
    )
    return ServerHandle(server=server, task=task, host=host, port=bound_port)


async def stop_server(handle: ServerHandle, timeout: float | None = None) -> None:
    """Gracefully stop the server behind `handle`.

    Open connections get `timeout` seconds to finish; after that the server
    is forced to exit.

    Args:
        handle: Handle returned by start_server
        timeout: Seconds to wait for a graceful shutdown, None waits forever
    """
    if handle.task.done():
        return

    handle.server.should_exit = True
    try:
        await asyncio.wait_for(asyncio.shield(handle.task), timeout)
    except TimeoutError:
        log_with_context(
            logger,
            "warning",
            "Graceful shutdown timed out, forcing exit",
            timeout=timeout,
            event_type="server_force_exit",
        )
        handle.server.force_exit = True
        await handle.task

    log_with_context(
        logger,
        "info",
        "Dashboard server stopped",
        host=handle.host,
        port=handle.port,
        event_type="server_stopped",
    )
