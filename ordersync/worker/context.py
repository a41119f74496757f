"""
Process-wide collaborators for the worker.

Clients are created once at startup, wired into the batch processor and kept
on the FastAPI app state until shutdown.
"""

import logging
from dataclasses import dataclass

from google.cloud import pubsub_v1

from ordersync.clients.bigcommerce import BigCommerceClient
from ordersync.clients.pubsub import NotificationPublisher, OrderQueue
from ordersync.clients.retry import RetryingCommerceClient
from ordersync.config import Settings
from ordersync.db.store import OrderStore
from ordersync.processor import OrderBatchProcessor

logger = logging.getLogger(__name__)


@dataclass
class WorkerContext:
    settings: Settings
    processor: OrderBatchProcessor
    queue: OrderQueue
    commerce: BigCommerceClient | None = None
    subscriber: pubsub_v1.SubscriberClient | None = None

    def close(self):
        if self.commerce is not None:
            self.commerce.close()
        if self.subscriber is not None:
            self.subscriber.close()


def build_context(settings: Settings) -> WorkerContext:
    """Create every client and the processor from settings."""
    commerce = BigCommerceClient(
        store_hash=settings.store_hash,
        client_id=settings.client_id,
        access_token=settings.access_token,
        api_version=settings.api_version,
        timeout=settings.request_timeout,
    )
    subscriber = pubsub_v1.SubscriberClient()
    publisher = pubsub_v1.PublisherClient()

    queue = OrderQueue.from_names(subscriber, settings.project_id, settings.subscription)
    notifications = NotificationPublisher.from_names(
        publisher, settings.project_id, settings.topic
    )

    processor = OrderBatchProcessor(
        commerce=RetryingCommerceClient(commerce, max_attempts=settings.max_attempts),
        store=OrderStore(settings.table),
        publisher=notifications,
        queue=queue,
        status_policy=settings.status_policy,
        store_name=settings.table,
    )
    logger.info(
        f"Worker wired: subscription={queue.subscription_path}, "
        f"topic={notifications.topic_path}, table={settings.table}"
    )

    return WorkerContext(
        settings=settings,
        processor=processor,
        queue=queue,
        commerce=commerce,
        subscriber=subscriber,
    )
