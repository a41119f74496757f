"""
Process-wide configuration for the order sync worker.

Settings are read once at startup from environment variables. A local `.env`
file is loaded first for development.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from ordersync.errors import ConfigurationError

# BigCommerce default order statuses
AWAITING_SHIPMENT_STATUS_ID = 9
# 'Awaiting Pickup' by default, renamed to 'Digital Order Complete' in the store
AWAITING_PICKUP_STATUS_ID = 8

DEFAULT_MAX_ATTEMPTS = 3

# (env var, field name) pairs that must be present
_REQUIRED = [
    ("BIGCOMMERCE_CLIENT_ID", "client_id"),
    ("BIGCOMMERCE_TOKEN", "access_token"),
    ("BIGCOMMERCE_STORE_HASH", "store_hash"),
    ("GOOGLE_CLOUD_PROJECT", "project_id"),
    ("ORDERS_SUBSCRIPTION", "subscription"),
    ("PROCESSED_TOPIC", "topic"),
]


class StatusPolicy(BaseModel):
    """Status ids applied to newly processed orders, by fulfillment type."""

    model_config = ConfigDict(frozen=True)

    physical_status_id: int = Field(default=AWAITING_SHIPMENT_STATUS_ID)
    digital_status_id: int = Field(default=AWAITING_PICKUP_STATUS_ID)

    def status_for(self, is_digital: bool) -> int:
        return self.digital_status_id if is_digital else self.physical_status_id


class Settings(BaseModel):
    """Worker settings"""

    model_config = ConfigDict(frozen=True)

    # BigCommerce credentials
    client_id: str
    access_token: str
    store_hash: str
    api_version: str = "v2"
    request_timeout: float = Field(default=30.0, gt=0)

    # Google Cloud resources
    project_id: str
    subscription: str = Field(description="Pub/Sub subscription holding new orders")
    topic: str = Field(description="Pub/Sub topic for processed-order notifications")
    table: str = Field(default="processed_orders", description="Orders table name")

    status_policy: StatusPolicy = Field(default_factory=StatusPolicy)
    max_attempts: int = Field(default=DEFAULT_MAX_ATTEMPTS, ge=1)
    pull_max_messages: int = Field(default=10, ge=1)


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def load_settings() -> Settings:
    """
    Build Settings from the environment.

    Returns:
        Settings

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    load_dotenv()

    missing = [env for env, _ in _REQUIRED if not os.getenv(env)]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    values = {field: os.environ[env] for env, field in _REQUIRED}

    timeout = os.getenv("BIGCOMMERCE_TIMEOUT")
    try:
        return Settings(
            **values,
            api_version=os.getenv("BIGCOMMERCE_API_VERSION", "v2"),
            request_timeout=float(timeout) if timeout else 30.0,
            table=os.getenv("ORDERS_TABLE", "processed_orders"),
            status_policy=StatusPolicy(
                physical_status_id=_int_env(
                    "PHYSICAL_ORDER_STATUS_ID", AWAITING_SHIPMENT_STATUS_ID
                ),
                digital_status_id=_int_env(
                    "DIGITAL_ORDER_STATUS_ID", AWAITING_PICKUP_STATUS_ID
                ),
            ),
            max_attempts=_int_env("COMMERCE_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
            pull_max_messages=_int_env("PULL_MAX_MESSAGES", 10),
        )
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise ConfigurationError(f"Invalid configuration: {e}") from e
