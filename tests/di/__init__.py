"""Mock component providers and the test container.

Importing this package registers the mock subclasses that
``build_test_container`` selects.
"""

from .notification import MockNotificationProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockNotificationProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
