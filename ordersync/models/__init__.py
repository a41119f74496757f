"""
ordersync data models.

This package contains the Pydantic models for orders, queue messages and
batch outcomes.
"""

from ordersync.models.message import QueueMessage
from ordersync.models.order import (
    SUBRESOURCE_FIELDS,
    Coupon,
    Order,
    OrderProduct,
    ShippingAddress,
    SubresourceRef,
)
from ordersync.models.result import BatchFailed, BatchOutcome, BatchSucceeded
from ordersync.models.task import ProcessOrdersTask, PullOrdersTask, TaskResponse

__all__ = [
    # Order models
    "SUBRESOURCE_FIELDS",
    "Coupon",
    "Order",
    "OrderProduct",
    "ShippingAddress",
    "SubresourceRef",
    # Queue models
    "QueueMessage",
    # Outcomes
    "BatchFailed",
    "BatchOutcome",
    "BatchSucceeded",
    # Task payloads
    "ProcessOrdersTask",
    "PullOrdersTask",
    "TaskResponse",
]
