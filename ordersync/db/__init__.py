"""
ordersync database module.

Provides connection management and the order store.
Uses SQLAlchemy Core with Cloud SQL Python Connector.
"""

from ordersync.db.connection import DatabaseConnection
from ordersync.db.store import OrderStore
from ordersync.db.unit_of_work import UnitOfWork

__all__ = ["DatabaseConnection", "OrderStore", "UnitOfWork"]
