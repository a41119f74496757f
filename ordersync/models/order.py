"""
Order models.

Orders arrive as BigCommerce v2 order payloads. Products, shipping addresses
and coupons are not inlined; the payload holds a reference to each collection
which has to be fetched separately and swapped in before the order is stored.
Fields this service does not use are kept as-is so the stored document mirrors
what the platform sent. Text fields accept numbers (totals, zip codes, SKUs)
and hold them as strings.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

SUBRESOURCE_FIELDS = ("products", "shipping_addresses", "coupons")


class SubresourceRef(BaseModel):
    """Reference to a related collection on the commerce platform"""

    url: Optional[str] = Field(default=None, description="Absolute resource URL")
    resource: str = Field(description="Resource path, e.g. /orders/100/products")


class OrderProduct(BaseModel):
    """Line item in an order"""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    sku: Optional[str] = None
    quantity: Optional[int] = None
    name: Optional[str] = None


class ShippingAddress(BaseModel):
    """Shipping destination for an order"""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None
    street_1: Optional[str] = None
    street_2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    country: Optional[str] = None
    shipping_method: Optional[str] = None


class Coupon(BaseModel):
    """Coupon applied to an order"""

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    code: Optional[str] = None


class Order(BaseModel):
    """
    Order as received from the queue.

    The three sub-resource fields hold a SubresourceRef until the order is
    enriched, then the fetched list.
    """

    model_config = ConfigDict(
        extra="allow", validate_assignment=True, coerce_numbers_to_str=True
    )

    id: int = Field(description="Commerce platform order id")
    status: Optional[str] = Field(default=None, description="Status name")
    payment_method: Optional[str] = None
    total_inc_tax: Optional[str] = Field(
        default=None, description="Order total including tax, as sent by the platform"
    )
    customer_message: Optional[str] = None
    order_is_digital: bool = Field(
        default=False, description="True if the order has no physical items"
    )

    products: SubresourceRef | list[OrderProduct]
    shipping_addresses: SubresourceRef | list[ShippingAddress]
    coupons: SubresourceRef | list[Coupon]

    def subresource_refs(self) -> dict[str, SubresourceRef]:
        """Sub-resource references that have not been fetched yet."""
        refs = {}
        for field in SUBRESOURCE_FIELDS:
            value = getattr(self, field)
            if isinstance(value, SubresourceRef):
                refs[field] = value
        return refs

    @property
    def is_enriched(self) -> bool:
        return not self.subresource_refs()

    @property
    def primary_shipping_address(self) -> ShippingAddress | None:
        if isinstance(self.shipping_addresses, list) and self.shipping_addresses:
            return self.shipping_addresses[0]
        return None

    def to_document(self) -> dict[str, Any]:
        """Serialize for storage, keeping only fields that were actually sent."""
        return self.model_dump(mode="json", exclude_unset=True)
