"""Test utilities for httprouter applications::

    from httprouter.testing import TestClient
"""

from httprouter.testing.client import TestClient

__all__ = ["TestClient"]
