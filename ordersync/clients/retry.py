"""
Bounded linear retry for commerce platform calls.

A call is attempted up to `max_attempts` times in a row with no delay between
attempts. Every exception is retried the same way; once the budget is spent
the last exception is re-raised unchanged.
"""

import logging
from typing import Any, Callable, TypeVar

from ordersync.clients.bigcommerce import BigCommerceClient
from ordersync.config import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)

T = TypeVar("T")


def call_with_retry(
    fn: Callable[..., T],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    description: str | None = None,
    **kwargs: Any,
) -> T:
    """
    Call `fn(*args, **kwargs)`, retrying immediately on failure.

    Args:
        fn: Callable to invoke
        max_attempts: Total number of attempts, at least 1
        description: Label for log lines (defaults to the callable's name)

    Returns:
        Whatever `fn` returns on its first successful attempt

    Raises:
        ValueError: If max_attempts is less than 1
        Exception: The error from the final attempt
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    label = description or getattr(fn, "__name__", repr(fn))

    for attempt in range(1, max_attempts + 1):
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if attempt == max_attempts:
                logger.error(f"{label} failed after {attempt} attempts: {e}")
                raise
            logger.warning(
                f"{label} failed (attempt {attempt}/{max_attempts}), retrying: {e}"
            )

    # Unreachable: the loop either returns or raises
    raise AssertionError("retry loop exited without a result")


class RetryingCommerceClient:
    """Applies call_with_retry to each BigCommerce read and write."""

    def __init__(
        self, client: BigCommerceClient, max_attempts: int = DEFAULT_MAX_ATTEMPTS
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self.client = client
        self.max_attempts = max_attempts

    def get(self, resource: str) -> Any:
        return call_with_retry(
            self.client.get,
            resource,
            max_attempts=self.max_attempts,
            description=f"GET {resource}",
        )

    def put(self, resource: str, payload: dict) -> Any:
        return call_with_retry(
            self.client.put,
            resource,
            payload,
            max_attempts=self.max_attempts,
            description=f"PUT {resource}",
        )
