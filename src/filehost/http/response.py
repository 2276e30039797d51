"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    ``content_type`` defaults to ``None``: file bodies are sent without a
    ``Content-Type`` header, leaving interpretation to the client.
    """

    body: str | bytes = b""
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    @property
    def body_bytes(self) -> bytes:
        """Body encoded to bytes (UTF-8 for text bodies)."""
        if isinstance(self.body, bytes):
            return self.body
        return self.body.encode("utf-8")

    @property
    def text(self) -> str:
        """Body decoded as UTF-8 (for tests and diagnostics)."""
        return self.body_bytes.decode("utf-8", errors="replace")
