"""ASGI response sending — translates a Response into ASGI messages."""

from filehost._internal.asgi import Send
from filehost.http.response import Response


async def send_response(response: Response, send: Send) -> None:
    """Translate a Response into ASGI send() calls.

    ``content-type`` is only emitted when the response sets one.
    ``content-length`` is always emitted.
    """
    raw_headers: list[tuple[bytes, bytes]] = []
    if response.content_type is not None:
        raw_headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))

    body = response.body_bytes

    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
