"""Infrastructure component providers.

Production subclasses are imported here so ``get_provider`` can find them
through ``__subclasses__()``.
"""

from .notification import NotificationProvider, ProdNotificationProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "NotificationProvider",
    "PersistenceProvider",
    "ProdNotificationProvider",
    "ProdPersistenceProvider",
]
