"""Test utilities for filehost applications::

    from filehost.testing import TestClient
"""

from filehost.testing.client import TestClient

__all__ = ["TestClient"]
