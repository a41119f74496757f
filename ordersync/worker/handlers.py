"""
Task handlers for order batch processing.

These handlers sit between the HTTP routes and the batch processor. They log
the outcome and turn it into the invocation response.
"""

import logging
from typing import Any, Sequence

from ordersync.clients.pubsub import OrderQueue
from ordersync.models.message import QueueMessage
from ordersync.processor import OrderBatchProcessor

logger = logging.getLogger(__name__)


def handle_process_orders(
    processor: OrderBatchProcessor,
    messages: Sequence[QueueMessage],
    table: str,
) -> dict[str, Any]:
    """
    Process a batch of messages.

    Args:
        processor: Configured batch processor
        messages: Messages in delivery order
        table: Store table name for the response message

    Returns:
        dict: `{"statusCode": 200, "body": {...}}`

    Raises:
        OrderProcessingError: On the first failing message
    """
    logger.info(f"Processing batch of {len(messages)} order messages")
    result = processor.process_batch(messages)
    return result.to_response(table)


def handle_pull_orders(
    processor: OrderBatchProcessor,
    queue: OrderQueue,
    max_messages: int,
    table: str,
) -> dict[str, Any]:
    """
    Pull up to `max_messages` from the subscription and process them.

    An empty pull is a successful batch of zero orders.

    Raises:
        OrderProcessingError: On the first failing message
    """
    messages = queue.pull(max_messages)
    if not messages:
        logger.info("No order messages waiting")
    return handle_process_orders(processor, messages, table)
