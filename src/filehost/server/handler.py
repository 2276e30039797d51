"""ASGI handler — translates one HTTP scope into one file response.

The only component that touches raw ASGI scopes.  Builds a Request,
rejects anything but GET, resolves the path against the configured
root, serves the file, and sends the result back through ``send()``.
"""

import logging

from filehost._internal.asgi import Receive, Scope, Send
from filehost.config import HostConfig
from filehost.http.request import Request
from filehost.http.response import Response
from filehost.resolve import resolve_path
from filehost.responder import method_not_supported, serve_file
from filehost.server.sender import send_response

logger = logging.getLogger("filehost.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    config: HostConfig,
) -> None:
    """Process a single HTTP request."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        response = await dispatch(request, config)
    except Exception:
        logger.exception("500 %s %s", request.method, request.path)
        response = Response(body="Internal Server Error", status=500)

    await send_response(response, send)


async def dispatch(request: Request, config: HostConfig) -> Response:
    """GET → resolve and serve; any other method → fixed reply, no file access."""
    if not request.is_get:
        return method_not_supported(strict_status=config.strict_status)

    path = resolve_path(request.path, config.root_dir, config.rewrites)
    return await serve_file(path, strict_status=config.strict_status)
