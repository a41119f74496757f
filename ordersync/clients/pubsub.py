"""
Pub/Sub adapters for the new-orders subscription and the processed topic.

OrderQueue pulls and acknowledges order messages; NotificationPublisher
announces processed orders. Both wrap google-cloud-pubsub clients that are
created once per process and passed in.
"""

import logging

from google.cloud import pubsub_v1

from ordersync.models.message import QueueMessage

logger = logging.getLogger(__name__)

# Seconds to wait for Pub/Sub to confirm a publish
PUBLISH_TIMEOUT = 30


class OrderQueue:
    """Pull subscription holding new order messages."""

    def __init__(self, subscriber: pubsub_v1.SubscriberClient, subscription_path: str):
        self.subscriber = subscriber
        self.subscription_path = subscription_path

    @classmethod
    def from_names(
        cls, subscriber: pubsub_v1.SubscriberClient, project_id: str, subscription: str
    ) -> "OrderQueue":
        return cls(subscriber, subscriber.subscription_path(project_id, subscription))

    def pull(self, max_messages: int) -> list[QueueMessage]:
        """
        Pull up to `max_messages` messages without waiting for more to arrive.

        Returns:
            Messages in delivery order, with the ack id as receipt token
        """
        response = self.subscriber.pull(
            request={
                "subscription": self.subscription_path,
                "max_messages": max_messages,
            },
        )
        messages = [
            QueueMessage(
                body=received.message.data.decode("utf-8"),
                receipt_token=received.ack_id,
                message_id=received.message.message_id,
            )
            for received in response.received_messages
        ]
        logger.info(f"Pulled {len(messages)} messages from {self.subscription_path}")
        return messages

    def acknowledge(self, receipt_token: str) -> None:
        """Acknowledge one message. Blocks until Pub/Sub accepts the request."""
        self.subscriber.acknowledge(
            request={
                "subscription": self.subscription_path,
                "ack_ids": [receipt_token],
            },
        )


class NotificationPublisher:
    """Topic that announces processed orders."""

    def __init__(self, publisher: pubsub_v1.PublisherClient, topic_path: str):
        self.publisher = publisher
        self.topic_path = topic_path

    @classmethod
    def from_names(
        cls, publisher: pubsub_v1.PublisherClient, project_id: str, topic: str
    ) -> "NotificationPublisher":
        return cls(publisher, publisher.topic_path(project_id, topic))

    def publish(self, subject: str, message: str) -> str:
        """
        Publish a notification and wait for the server to accept it.

        Args:
            subject: Short subject line, sent as the `subject` attribute
            message: Notification text

        Returns:
            Server-assigned message id
        """
        future = self.publisher.publish(
            self.topic_path, message.encode("utf-8"), subject=subject
        )
        return future.result(timeout=PUBLISH_TIMEOUT)
