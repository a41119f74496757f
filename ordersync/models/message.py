"""
Queue message models.

A QueueMessage is one entry pulled from the new-orders subscription. Its body
is the serialized order; the receipt token is what acknowledges it.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class QueueMessage(BaseModel):
    """A single queued order message"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    body: str = Field(description="Serialized order JSON")
    receipt_token: str = Field(
        validation_alias=AliasChoices("receipt_token", "receiptToken", "receiptHandle"),
        description="Opaque token used to acknowledge the message",
    )
    message_id: str = Field(
        validation_alias=AliasChoices("message_id", "messageId"),
        description="Unique message identifier",
    )
