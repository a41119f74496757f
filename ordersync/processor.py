"""
Order batch processing.

Each queued message is taken through the full pipeline before the next one
starts:

1. Parse the order from the message body
2. Fetch products, shipping addresses and coupons from BigCommerce
3. Store the enriched order
4. Set the order's status on BigCommerce (digital vs physical)
5. Publish the processed-order notification
6. Acknowledge the message

The first failure stops the batch and is raised to the caller. Messages
before it have been fully processed and acknowledged; the failing message
and everything after it stay on the queue for redelivery.
"""

import logging
from typing import Any, Protocol, Sequence

from pydantic import ValidationError

from ordersync.config import StatusPolicy
from ordersync.errors import (
    AcknowledgeFailed,
    MalformedMessage,
    OrderProcessingError,
    PersistenceFailed,
    PublishFailed,
    StatusUpdateFailed,
    SubresourceFetchFailed,
)
from ordersync.models.message import QueueMessage
from ordersync.models.order import SUBRESOURCE_FIELDS, Order
from ordersync.models.result import BatchFailed, BatchOutcome, BatchSucceeded
from ordersync.notifications import format_order_notification

logger = logging.getLogger(__name__)


class CommercePlatform(Protocol):
    def get(self, resource: str) -> Any: ...

    def put(self, resource: str, payload: dict) -> Any: ...


class Store(Protocol):
    def put(self, order: Order) -> None: ...


class Publisher(Protocol):
    def publish(self, subject: str, message: str) -> Any: ...


class Queue(Protocol):
    def acknowledge(self, receipt_token: str) -> None: ...


def parse_order(message: QueueMessage) -> Order:
    """
    Parse the order carried in a queue message.

    Raises:
        MalformedMessage: If the body is not valid JSON or not a valid order
    """
    try:
        return Order.model_validate_json(message.body)
    except ValidationError as e:
        raise MalformedMessage(
            f"Message {message.message_id} does not contain a valid order: {e}",
            message_id=message.message_id,
        ) from e


class OrderBatchProcessor:
    """
    Processes batches of queued orders sequentially.

    All collaborators are created once per process and injected here.

    Args:
        commerce: BigCommerce client whose get/put already retry
        store: Durable order store
        publisher: Processed-order notification publisher
        queue: Queue the messages came from, used to acknowledge them
        status_policy: Status ids for digital and physical orders
        store_name: Store name used in the success message
    """

    def __init__(
        self,
        commerce: CommercePlatform,
        store: Store,
        publisher: Publisher,
        queue: Queue,
        status_policy: StatusPolicy | None = None,
        store_name: str = "the order store",
    ):
        self.commerce = commerce
        self.store = store
        self.publisher = publisher
        self.queue = queue
        self.status_policy = status_policy or StatusPolicy()
        self.store_name = store_name

    def process_batch(self, messages: Sequence[QueueMessage]) -> BatchSucceeded:
        """
        Process every message in order.

        Returns:
            BatchSucceeded with the number of messages processed

        Raises:
            OrderProcessingError: The first failure; `processed` holds the
                number of messages completed before it
        """
        for index, message in enumerate(messages):
            try:
                self.process_message(message)
            except OrderProcessingError as e:
                e.processed = index
                logger.error(
                    f"Batch stopped at message {index + 1}/{len(messages)} "
                    f"({e.kind}): {e.detail}"
                )
                raise

        logger.info(f"Successfully wrote {len(messages)} orders to {self.store_name}")
        return BatchSucceeded(count=len(messages))

    def run_batch(self, messages: Sequence[QueueMessage]) -> BatchOutcome:
        """Like process_batch, but returns a BatchFailed instead of raising."""
        try:
            return self.process_batch(messages)
        except OrderProcessingError as e:
            return BatchFailed(
                kind=e.kind,
                detail=e.detail,
                processed=e.processed,
                message_id=e.message_id,
                order_id=e.order_id,
            )

    def process_message(self, message: QueueMessage) -> Order:
        """Run one message through the whole pipeline."""
        order = parse_order(message)
        log_prefix = f"[Order: {order.id}]"

        logger.info(f"{log_prefix} Getting subresources")
        self.fetch_subresources(order, message)

        logger.info(f"{log_prefix} Writing order to {self.store_name}")
        self.persist(order, message)

        status_id = self.status_policy.status_for(order.order_is_digital)
        logger.info(f"{log_prefix} Updating order status to {status_id}")
        self.update_status(order, status_id, message)

        logger.info(f"{log_prefix} Sending processed notification")
        self.notify(order, message)

        logger.info(f"{log_prefix} Deleting message {message.message_id}")
        self.acknowledge(order, message)
        logger.info(f"{log_prefix} Message {message.message_id} acknowledged")

        return order

    def fetch_subresources(self, order: Order, message: QueueMessage) -> Order:
        """Replace the order's sub-resource references with their contents."""
        refs = order.subresource_refs()
        for field in SUBRESOURCE_FIELDS:
            ref = refs.get(field)
            if ref is None:
                continue
            try:
                contents = self.commerce.get(ref.resource)
            except Exception as e:
                raise SubresourceFetchFailed(
                    f"Could not fetch {field} for order {order.id}: {e}",
                    message_id=message.message_id,
                    order_id=order.id,
                ) from e

            if contents and not isinstance(contents, list):
                raise SubresourceFetchFailed(
                    f"Unexpected {field} payload for order {order.id}: "
                    f"expected a list, got {type(contents).__name__}",
                    message_id=message.message_id,
                    order_id=order.id,
                )

            try:
                setattr(order, field, contents or [])
            except ValidationError as e:
                raise SubresourceFetchFailed(
                    f"Unexpected {field} payload for order {order.id}: {e}",
                    message_id=message.message_id,
                    order_id=order.id,
                ) from e
        return order

    def persist(self, order: Order, message: QueueMessage) -> None:
        try:
            self.store.put(order)
        except Exception as e:
            raise PersistenceFailed(
                f"Could not store order {order.id}: {e}",
                message_id=message.message_id,
                order_id=order.id,
            ) from e

    def update_status(self, order: Order, status_id: int, message: QueueMessage) -> None:
        try:
            self.commerce.put(f"/orders/{order.id}", {"status_id": status_id})
        except Exception as e:
            raise StatusUpdateFailed(
                f"Could not set status {status_id} on order {order.id}: {e}",
                message_id=message.message_id,
                order_id=order.id,
            ) from e

    def notify(self, order: Order, message: QueueMessage) -> None:
        subject, body = format_order_notification(order)
        try:
            self.publisher.publish(subject, body)
        except Exception as e:
            raise PublishFailed(
                f"Could not publish notification for order {order.id}: {e}",
                message_id=message.message_id,
                order_id=order.id,
            ) from e

    def acknowledge(self, order: Order, message: QueueMessage) -> None:
        try:
            self.queue.acknowledge(message.receipt_token)
        except Exception as e:
            raise AcknowledgeFailed(
                f"Could not acknowledge message {message.message_id}: {e}",
                message_id=message.message_id,
                order_id=order.id,
            ) from e
