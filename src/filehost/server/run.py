"""Listener — starts a pounce ASGI server with the live FileHost object."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filehost.app import FileHost


def run_server(app: FileHost) -> None:
    """Start a pounce server for *app* and block until it stops.

    Pounce's ``run()`` takes an import string, but the CLI builds the app
    at runtime from its arguments, so ``pounce.Server`` is used directly
    with the ASGI callable.  Bind failures propagate to the caller.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=app.config.host,
        port=app.config.port,
        workers=app.config.workers,
        log_level=app.config.log_level,
    )
    server = Server(config, app)
    server.run()
