"""
Clients for the external services the worker talks to.
"""

from ordersync.clients.bigcommerce import BigCommerceClient, BigCommerceError
from ordersync.clients.pubsub import NotificationPublisher, OrderQueue
from ordersync.clients.retry import RetryingCommerceClient, call_with_retry

__all__ = [
    "BigCommerceClient",
    "BigCommerceError",
    "NotificationPublisher",
    "OrderQueue",
    "RetryingCommerceClient",
    "call_with_retry",
]
