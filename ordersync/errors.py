"""
Error types raised while processing an order batch.

Every error is fatal to the batch it occurs in. Each carries a stable `kind`
string used in worker responses and logs, plus whatever context was known
when the failure happened.
"""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""


class OrderProcessingError(Exception):
    """Base class for failures while processing a queued order."""

    kind = "OrderProcessingError"

    def __init__(
        self,
        detail: str,
        message_id: str | None = None,
        order_id: int | str | None = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.message_id = message_id
        self.order_id = order_id
        # Number of messages fully processed (and acknowledged) before this one
        self.processed = 0

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "detail": self.detail,
            "message_id": self.message_id,
            "order_id": self.order_id,
            "processed": self.processed,
        }


class MalformedMessage(OrderProcessingError):
    """The message body could not be parsed into an order."""

    kind = "MalformedMessage"


class SubresourceFetchFailed(OrderProcessingError):
    """Products, shipping addresses or coupons could not be fetched."""

    kind = "SubresourceFetchFailed"


class PersistenceFailed(OrderProcessingError):
    """The enriched order could not be written to the store."""

    kind = "PersistenceFailed"


class StatusUpdateFailed(OrderProcessingError):
    """The order status could not be updated on the commerce platform."""

    kind = "StatusUpdateFailed"


class PublishFailed(OrderProcessingError):
    """The processed-order notification could not be published."""

    kind = "PublishFailed"


class AcknowledgeFailed(OrderProcessingError):
    """The queue message could not be acknowledged."""

    kind = "AcknowledgeFailed"
