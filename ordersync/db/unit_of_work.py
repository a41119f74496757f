"""
Unit of Work pattern for transaction coordination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ordersync.db.connection import DatabaseConnection
from ordersync.db.repositories.order import OrderRepository
from ordersync.db.tables import DEFAULT_ORDERS_TABLE, build_orders_table

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


class UnitOfWork:
    """
    Unit of Work for managing database transactions.

    Usage:
        with UnitOfWork("processed_orders") as uow:
            uow.orders.put(order)
            uow.commit()  # Explicit commit

    Leaving the block without commit() discards the changes; an exception
    rolls back.
    """

    def __init__(self, orders_table: str = DEFAULT_ORDERS_TABLE):
        self._orders_table = build_orders_table(orders_table)
        self._session: Session | None = None
        self._orders: OrderRepository | None = None

    def __enter__(self) -> UnitOfWork:
        self._session = DatabaseConnection.get_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is not None:
            self.rollback()
        self._close()
        return False  # Don't suppress exceptions

    @property
    def session(self) -> Session:
        """Get current session (raises if not in context)."""
        if self._session is None:
            raise RuntimeError("UnitOfWork must be used within a context manager")
        return self._session

    @property
    def orders(self) -> OrderRepository:
        """Order repository for this unit of work."""
        if self._orders is None:
            self._orders = OrderRepository(self.session, self._orders_table)
        return self._orders

    def commit(self):
        """Commit the current transaction."""
        self.session.commit()

    def rollback(self):
        """Rollback the current transaction."""
        self.session.rollback()

    def _close(self):
        if self._session is not None:
            self._session.close()
            self._session = None
            self._orders = None
