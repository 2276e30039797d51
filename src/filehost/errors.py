"""Filehost exception hierarchy.

Shared across config loading, the CLI, and the server so every module
raises and catches the same types.
"""


class FilehostError(Exception):
    """Base for all filehost-specific errors."""


class ConfigurationError(FilehostError):
    """Raised when startup configuration is invalid.

    Covers an unreadable or malformed rewrite table file.  The CLI
    reports it and exits before the listener binds.
    """
