"""
Task endpoints for order batch processing.

A non-2xx response tells the trigger that the batch failed so it can redeliver
whatever is still on the queue.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from ordersync.errors import OrderProcessingError
from ordersync.models.task import ProcessOrdersTask, PullOrdersTask, TaskResponse
from ordersync.worker.context import WorkerContext
from ordersync.worker.handlers import handle_process_orders, handle_pull_orders

router = APIRouter()
logger = logging.getLogger(__name__)


def get_worker_context(request: Request) -> WorkerContext:
    """Worker context built at startup."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(status_code=503, detail="Worker not initialized")
    return context


def _failure(e: OrderProcessingError) -> HTTPException:
    logger.error(
        f"Order batch failed after {e.processed} processed messages: {e.kind}",
        extra={"json_fields": e.to_dict()},
    )
    return HTTPException(status_code=500, detail=e.to_dict())


@router.post("/process-orders", response_model=TaskResponse)
def process_orders_task(
    task: ProcessOrdersTask,
    context: WorkerContext = Depends(get_worker_context),
):
    """
    Process a batch of queued order messages.

    Args:
        task: Messages to process, in delivery order

    Returns:
        dict: `{"statusCode": 200, "body": {"status": 200, "message": ...}}`

    Flow (per message):
        1. Parse order
        2. Fetch products, shipping addresses and coupons
        3. Store enriched order
        4. Update order status on BigCommerce
        5. Publish processed notification
        6. Acknowledge message
    """
    try:
        return handle_process_orders(
            context.processor, task.messages, context.settings.table
        )
    except OrderProcessingError as e:
        raise _failure(e)


@router.post("/pull-orders", response_model=TaskResponse)
def pull_orders_task(
    task: PullOrdersTask | None = None,
    context: WorkerContext = Depends(get_worker_context),
):
    """
    Pull waiting order messages from the subscription and process them.

    Cloud Scheduler triggers this endpoint periodically.
    """
    max_messages = (
        task.max_messages
        if task is not None and task.max_messages
        else context.settings.pull_max_messages
    )
    try:
        return handle_pull_orders(
            context.processor, context.queue, max_messages, context.settings.table
        )
    except OrderProcessingError as e:
        raise _failure(e)
    except Exception as e:
        logger.error(f"Pulling order messages failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=f"Pulling order messages failed: {str(e)}",
        )
