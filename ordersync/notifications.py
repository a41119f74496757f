"""
Processed-order notification text.
"""

from ordersync.models.order import Order

SEPARATOR = "=" * 20


def _text(value) -> str:
    return "" if value is None else str(value)


def format_order_notification(order: Order) -> tuple[str, str]:
    """
    Build the subject and body announcing a newly processed order.

    Shipping details come from the first shipping address. Missing values are
    rendered as empty strings.

    Returns:
        (subject, message)
    """
    subject = f"New Order {order.id}"

    address = order.primary_shipping_address
    ship = address.model_dump() if address is not None else {}

    products = order.products if isinstance(order.products, list) else []
    product_lines = "\n".join(
        f"Sku: {_text(p.sku)} Quantity: {_text(p.quantity)} Name: {_text(p.name)}"
        for p in products
    )

    lines = [
        "",
        SEPARATOR,
        f"NEW ORDER {order.id} has been placed.",
        f"Status: {_text(order.status)}",
        f"Payment Method: {_text(order.payment_method)}",
        f"Payment Total: {_text(order.total_inc_tax)}",
        _text(order.customer_message),
        SEPARATOR,
        _text(ship.get("shipping_method")),
        "SHIP TO",
        f"{_text(ship.get('first_name'))} {_text(ship.get('last_name'))}",
        _text(ship.get("company")),
        _text(ship.get("street_1")),
        _text(ship.get("street_2")),
        f"{_text(ship.get('city'))}, {_text(ship.get('state'))} {_text(ship.get('zip'))}",
        _text(ship.get("country")),
        SEPARATOR,
        product_lines,
        SEPARATOR,
        "",
    ]
    return subject, "\n".join(lines)
