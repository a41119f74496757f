"""
Repository implementations for the order store.

Repositories encapsulate SQLAlchemy queries behind a small interface.
"""

from ordersync.db.repositories.order import OrderRepository, UnresolvedSubresourceError

__all__ = ["OrderRepository", "UnresolvedSubresourceError"]
