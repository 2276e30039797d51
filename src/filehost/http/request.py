"""Immutable HTTP request.

Only the metadata the file server looks at.  The body is never read:
non-GET requests are answered without touching it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str

    @property
    def is_get(self) -> bool:
        return self.method == "GET"

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(method=scope["method"], path=scope["path"])
