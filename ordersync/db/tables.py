"""
SQLAlchemy Table definitions for the order store.

The table name is deployment configuration, so tables are built on demand and
cached per name on the shared MetaData.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    MetaData,
    Table,
)
from sqlalchemy.dialects.postgresql import JSONB

metadata = MetaData()

DEFAULT_ORDERS_TABLE = "processed_orders"


def build_orders_table(name: str = DEFAULT_ORDERS_TABLE) -> Table:
    """
    Return the orders table with the given name.

    One row per order, keyed by the commerce platform order id. The enriched
    order is stored whole in `document`.
    """
    if name in metadata.tables:
        return metadata.tables[name]

    return Table(
        name,
        metadata,
        Column("id", BigInteger, primary_key=True, autoincrement=False),
        Column("document", JSONB, nullable=False),
        Column("is_digital", Boolean, nullable=False, default=False),
        Column("created_at", DateTime(timezone=True), nullable=False),
        Column("updated_at", DateTime(timezone=True), nullable=False),
    )
