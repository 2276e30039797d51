"""Server configuration.

HostConfig is a frozen dataclass, built once at startup and handed to
the app.  Nothing is re-read per request.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path

from filehost.errors import ConfigurationError
from filehost.resolve import RewriteTable

DEFAULT_REWRITE_FILE = Path("encoding.json")


def default_root() -> Path:
    """``<cwd>/data``, evaluated at call time."""
    return Path.cwd() / "data"


@dataclass(frozen=True, slots=True)
class HostConfig:
    """Server configuration. Immutable after creation.

    Override what you need::

        config = HostConfig(root_dir=Path("/srv/files"), port=9000)
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    workers: int = 1
    log_level: str = "info"

    # Files
    root_dir: Path = field(default_factory=default_root)
    rewrites: RewriteTable = field(default_factory=RewriteTable)

    # Send 404/405 instead of 200 for not-found and non-GET responses
    strict_status: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            msg = f"Port out of range: {self.port}"
            raise ConfigurationError(msg)
        if self.workers < 1:
            msg = f"workers must be at least 1, got {self.workers}"
            raise ConfigurationError(msg)


def load_rewrites(path: str | Path = DEFAULT_REWRITE_FILE) -> RewriteTable:
    """Load a rewrite table from a JSON file.

    The file must hold a flat object of string keys to string values.
    Pairs keep the order they are written in the file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            JSON, or not a flat string-to-string object.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Couldn't read {path}: {exc}"
        raise ConfigurationError(msg) from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Couldn't parse {path}: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object, got {type(data).__name__}"
        raise ConfigurationError(msg)

    for key, value in data.items():
        if not isinstance(value, str):
            msg = f"{path}: value for {key!r} must be a string, got {type(value).__name__}"
            raise ConfigurationError(msg)

    try:
        return RewriteTable.from_mapping(data)
    except ValueError as exc:
        msg = f"{path}: {exc}"
        raise ConfigurationError(msg) from exc
