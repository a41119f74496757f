"""
Batch processing outcomes.

A batch either succeeds as a whole or fails on the first error. Both cases
are plain values so the worker can build its response the same way for each.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field


class BatchSucceeded(BaseModel):
    """Every message in the batch was processed and acknowledged"""

    outcome: Literal["success"] = "success"
    count: int = Field(ge=0, description="Number of orders processed")

    def to_response(self, table: str) -> dict[str, Any]:
        message = f"Successfully wrote {self.count} orders to {table}"
        return {
            "statusCode": 200,
            "body": {"status": 200, "message": message},
        }


class BatchFailed(BaseModel):
    """Processing stopped at the first failing message"""

    outcome: Literal["failure"] = "failure"
    kind: str = Field(description="Error kind, e.g. StatusUpdateFailed")
    detail: str
    processed: int = Field(
        default=0, ge=0, description="Messages fully processed before the failure"
    )
    message_id: str | None = None
    order_id: int | str | None = None

    def to_response(self, table: str) -> dict[str, Any]:
        return {
            "statusCode": 500,
            "body": {
                "status": 500,
                "message": f"{self.kind}: {self.detail}",
                "processed": self.processed,
                "message_id": self.message_id,
                "order_id": self.order_id,
            },
        }


BatchOutcome = BatchSucceeded | BatchFailed
