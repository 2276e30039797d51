"""Filehost CLI — parse arguments, build the config once, start serving.

Entry point registered as ``filehost`` in ``pyproject.toml``::

    [project.scripts]
    filehost = "filehost.cli:main"
"""

import argparse
import logging
import sys
from pathlib import Path

from filehost.config import DEFAULT_REWRITE_FILE, HostConfig, default_root, load_rewrites
from filehost.errors import ConfigurationError
from filehost.resolve import RewriteTable

logger = logging.getLogger("filehost.cli")

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filehost",
        description="Serve files from a directory over HTTP GET. Root defaults to ./data.",
    )
    parser.add_argument(
        "-r",
        dest="rootdir",
        type=Path,
        default=None,
        metavar="PATH",
        help="Directory to serve files from (default: ./data)",
    )
    parser.add_argument(
        "-e",
        "--encoding",
        nargs="?",
        type=Path,
        const=DEFAULT_REWRITE_FILE,
        default=None,
        metavar="PATH",
        help=f"JSON table of path substring rewrites (default file: ./{DEFAULT_REWRITE_FILE})",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    parser.add_argument("--port", type=int, default=8080, help="Bind port number")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker count (each worker runs its own event loop)",
    )
    parser.add_argument(
        "--strict-status",
        action="store_true",
        help="Answer not-found with 404 and non-GET with 405 instead of 200",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Log level",
    )
    return parser


def build_config(args: argparse.Namespace) -> HostConfig:
    """Turn parsed arguments into a HostConfig.

    Raises:
        ConfigurationError: If the rewrite table can't be loaded or a
            value is out of range.
    """
    rewrites = load_rewrites(args.encoding) if args.encoding is not None else RewriteTable()
    return HostConfig(
        host=args.host,
        port=args.port,
        workers=args.workers,
        log_level=args.log_level,
        root_dir=args.rootdir if args.rootdir is not None else default_root(),
        rewrites=rewrites,
        strict_status=args.strict_status,
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``filehost`` command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from filehost.app import FileHost

    try:
        FileHost(config).run()
    except OSError as exc:
        print(f"Error: couldn't serve on {config.host}:{config.port}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
