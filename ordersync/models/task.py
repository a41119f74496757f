"""
Worker task payload models.

These models define the request and response bodies of the worker's
`/tasks/*` endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field

from ordersync.models.message import QueueMessage


class ProcessOrdersTask(BaseModel):
    """Batch of queued order messages delivered by the trigger"""

    messages: list[QueueMessage] = Field(
        default_factory=list, description="Messages to process, in order"
    )


class PullOrdersTask(BaseModel):
    """Pull-and-process trigger payload (sent by Cloud Scheduler)"""

    max_messages: int | None = Field(
        default=None,
        ge=1,
        description="Override for the number of messages to pull",
    )


class TaskResponse(BaseModel):
    """Response for task endpoints"""

    statusCode: int
    body: dict[str, Any]
