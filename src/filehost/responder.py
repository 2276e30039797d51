"""File responder — reads a resolved path and builds the response.

Every read failure is answered the same way, whatever the cause
(missing file, permission denied, directory).  The one exception is
``favicon.ico``: browsers ask for it unprompted, so a missing favicon
gets an empty body instead of the not-found text.
"""

import logging
from pathlib import Path

import anyio

from filehost.http.response import Response

logger = logging.getLogger("filehost.server")

NOT_FOUND_BODY = "404 File not found"
METHOD_NOT_SUPPORTED_BODY = "Only GET-requests supported"
FAVICON_NAME = "favicon.ico"


def not_found(*, strict_status: bool = False) -> Response:
    """The uniform not-found response."""
    response = Response(body=NOT_FOUND_BODY)
    if strict_status:
        return response.with_status(404)
    return response


def method_not_supported(*, strict_status: bool = False) -> Response:
    """Response for any method other than GET."""
    response = Response(body=METHOD_NOT_SUPPORTED_BODY)
    if strict_status:
        return response.with_status(405).with_header("Allow", "GET")
    return response


async def serve_file(path: Path | None, *, strict_status: bool = False) -> Response:
    """Read *path* and return its bytes, or the not-found response.

    The read runs in a worker thread (``anyio.Path``), so other requests
    keep being scheduled while it is pending.
    """
    if path is None:
        return not_found(strict_status=strict_status)

    try:
        contents = await anyio.Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        # ValueError: the path holds a NUL byte, which no file can match
        if path.name == FAVICON_NAME:
            logger.debug("No favicon at %s", path)
            return Response(body=b"")
        logger.warning("Error serving file (%s): %s", path, exc)
        return not_found(strict_status=strict_status)

    logger.info("Served file [%s]", path)
    return Response(body=contents)
