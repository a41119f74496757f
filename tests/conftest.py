"""
pytest configuration and fixtures.

Loads environment variables from .env file for all tests and provides
order payload fixtures shared across test modules.
"""

import json
from pathlib import Path

import pytest
from dotenv import load_dotenv

from ordersync.models.message import QueueMessage


def pytest_configure(config):
    """Load .env file before running tests"""
    project_root = Path(__file__).parent.parent
    env_file = project_root / ".env"

    if env_file.exists():
        load_dotenv(env_file)


def make_order_payload(order_id: int = 42, is_digital: bool = False, **fields) -> dict:
    """BigCommerce v2 order payload with unresolved sub-resource references."""
    base = f"https://api.bigcommerce.com/stores/abc123/v2/orders/{order_id}"
    payload = {
        "id": order_id,
        "status": "Awaiting Fulfillment",
        "payment_method": "Credit Card",
        "total_inc_tax": "55.0000",
        "customer_message": "Please gift wrap",
        "order_is_digital": is_digital,
        "currency_code": "USD",
        "products": {
            "url": f"{base}/products",
            "resource": f"/orders/{order_id}/products",
        },
        "shipping_addresses": {
            "url": f"{base}/shippingaddresses",
            "resource": f"/orders/{order_id}/shippingaddresses",
        },
        "coupons": {
            "url": f"{base}/coupons",
            "resource": f"/orders/{order_id}/coupons",
        },
    }
    payload.update(fields)
    return payload


def make_message(order_id: int = 42, is_digital: bool = False, **fields) -> QueueMessage:
    return QueueMessage(
        body=json.dumps(make_order_payload(order_id, is_digital, **fields)),
        receipt_token=f"ack-{order_id}",
        message_id=f"msg-{order_id}",
    )


SAMPLE_PRODUCTS = [
    {"id": 1, "sku": "TSHIRT-BLU-M", "quantity": 2, "name": "Blue T-Shirt"},
    {"id": 2, "sku": "MUG-01", "quantity": 1, "name": "Coffee Mug"},
]

SAMPLE_SHIPPING_ADDRESSES = [
    {
        "id": 7,
        "first_name": "Jane",
        "last_name": "Doe",
        "company": "Acme",
        "street_1": "1 Main St",
        "street_2": "Suite 5",
        "city": "Austin",
        "state": "Texas",
        "zip": "78701",
        "country": "United States",
        "shipping_method": "Free Shipping",
    }
]

SAMPLE_COUPONS = [{"id": 3, "code": "SAVE10", "amount": "5.0000"}]


def subresource_contents(resource: str):
    """Fake BigCommerce GET responses keyed by resource path suffix."""
    if resource.endswith("/products"):
        return [dict(p) for p in SAMPLE_PRODUCTS]
    if resource.endswith("/shippingaddresses"):
        return [dict(a) for a in SAMPLE_SHIPPING_ADDRESSES]
    if resource.endswith("/coupons"):
        return [dict(c) for c in SAMPLE_COUPONS]
    raise AssertionError(f"unexpected resource {resource}")


@pytest.fixture
def order_message() -> QueueMessage:
    return make_message()


@pytest.fixture
def message_factory():
    """Build QueueMessages: message_factory(order_id, is_digital, **fields)."""
    return make_message


@pytest.fixture
def payload_factory():
    """Build raw order payload dicts."""
    return make_order_payload


@pytest.fixture
def commerce_get():
    """Side effect for a mocked commerce client's get()."""
    return subresource_contents
