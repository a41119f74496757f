"""
Base repository for tables keyed by an integer id.
"""

from typing import Any

from sqlalchemy import Table, select
from sqlalchemy.orm import Session


class BaseRepository:
    """
    Repository over a single table with an `id` primary key.

    The table is passed in rather than fixed on the class because table names
    are configured per deployment.
    """

    def __init__(self, session: Session, table: Table):
        self.session = session
        self.table = table

    def get_row(self, id: int) -> Any | None:
        """Fetch the raw row for an id, or None if absent."""
        stmt = select(self.table).where(self.table.c.id == id)
        return self.session.execute(stmt).fetchone()
