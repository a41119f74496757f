"""
Repository for processed orders.
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.dialects.postgresql import insert

from ordersync.db.repositories.base import BaseRepository
from ordersync.models.order import Order


class UnresolvedSubresourceError(ValueError):
    """An order still holding sub-resource references was passed for storage."""


class OrderRepository(BaseRepository):
    """Stores enriched orders as JSONB documents keyed by order id."""

    def put(self, order: Order) -> None:
        """
        Insert or overwrite the stored document for an order.

        There is no version check: the last write for an id wins.

        Args:
            order: Order with products, shipping addresses and coupons fetched

        Raises:
            UnresolvedSubresourceError: If any sub-resource is still a reference
        """
        unresolved = order.subresource_refs()
        if unresolved:
            raise UnresolvedSubresourceError(
                f"Order {order.id} has unresolved sub-resources: "
                f"{', '.join(sorted(unresolved))}"
            )

        now = datetime.now(timezone.utc)
        document = order.to_document()

        stmt = (
            insert(self.table)
            .values(
                id=order.id,
                document=document,
                is_digital=order.order_is_digital,
                created_at=now,
                updated_at=now,
            )
            .on_conflict_do_update(
                index_elements=["id"],
                set_={
                    "document": document,
                    "is_digital": order.order_is_digital,
                    "updated_at": now,
                },
            )
        )
        self.session.execute(stmt)

    def get(self, order_id: int) -> dict[str, Any] | None:
        """Return the stored order document, or None if the order is unknown."""
        row = self.get_row(order_id)
        if row is None:
            return None
        return row.document
