"""Filehost — serve files from a directory over HTTP GET.

Maps each request path onto a root directory, optionally rewriting
substrings first, and streams the file's bytes back.

Basic usage::

    from pathlib import Path

    from filehost import FileHost, HostConfig

    app = FileHost(HostConfig(root_dir=Path("./data")))
    app.run()
"""

from filehost.app import FileHost
from filehost.config import HostConfig, load_rewrites
from filehost.errors import ConfigurationError, FilehostError
from filehost.http.request import Request
from filehost.http.response import Response
from filehost.resolve import RewriteTable, resolve_path
from filehost.responder import serve_file

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FileHost",
    "FilehostError",
    "HostConfig",
    "Request",
    "Response",
    "RewriteTable",
    "load_rewrites",
    "resolve_path",
    "serve_file",
]
