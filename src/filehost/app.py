"""Filehost application — the ASGI callable the listener serves.

Holds the frozen HostConfig and threads it into every request.
No state is shared between requests beyond that config.
"""

import logging

from filehost._internal.asgi import Receive, Scope, Send
from filehost.config import HostConfig
from filehost.server.handler import handle_request

logger = logging.getLogger("filehost.server")


class FileHost:
    """Serves files under ``config.root_dir`` over HTTP GET.

    Usage::

        app = FileHost(HostConfig(root_dir=Path("./public")))
        app.run()

    Or hand ``app`` to any ASGI server.
    """

    __slots__ = ("config",)

    def __init__(self, config: HostConfig | None = None) -> None:
        self.config = config or HostConfig()

    def run(self) -> None:
        """Start the pounce listener on ``config.host:config.port``."""
        from filehost.server.run import run_server

        run_server(self)

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(scope, receive, send, config=self.config)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        There is nothing to open or close; startup only announces
        where files are served from.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                logger.info("Serving files from %s", self.config.root_dir)
                if self.config.rewrites:
                    logger.info("Applying %d path rewrite(s)", len(self.config.rewrites))
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
