"""
Order store used by the batch processor.
"""

import logging

from ordersync.db.unit_of_work import UnitOfWork
from ordersync.models.order import Order

logger = logging.getLogger(__name__)


class OrderStore:
    """Durable store for enriched orders, one transaction per write."""

    def __init__(self, table_name: str):
        self.table_name = table_name

    def put(self, order: Order) -> None:
        with UnitOfWork(self.table_name) as uow:
            uow.orders.put(order)
            uow.commit()
        logger.debug(f"Stored order {order.id} in {self.table_name}")
