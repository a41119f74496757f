"""
Cloud SQL connection pool for the order store.

Connects as an IAM database user through the Cloud SQL Python Connector.
The pool is opened once in the worker lifespan and shared by every batch.
"""

import os

from google.cloud.sql.connector import Connector
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker


class DatabaseConnection:
    """
    Process-wide engine and session factory.

    Batches run one at a time, so two pooled connections (plus two overflow)
    are enough. Settings not passed to `initialize` are read from
    INSTANCE_CONNECTION_NAME, DB_NAME and DB_USER.
    """

    _engine: Engine | None = None
    _connector: Connector | None = None
    _session_factory: sessionmaker | None = None
    _initialized: bool = False

    @classmethod
    def initialize(
        cls,
        instance_connection_name: str | None = None,
        db_name: str | None = None,
        db_user: str | None = None,
        pool_size: int = 2,
        max_overflow: int = 2,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
    ):
        """
        Open the pool. Calling it again while open is a no-op.

        Raises:
            ValueError: If the instance name or IAM user is not configured
        """
        if cls._initialized:
            return

        instance_connection_name = instance_connection_name or os.getenv(
            "INSTANCE_CONNECTION_NAME"
        )
        db_name = db_name or os.getenv("DB_NAME", "ordersync")
        db_user = db_user or os.getenv("DB_USER")

        if not instance_connection_name:
            raise ValueError(
                "INSTANCE_CONNECTION_NAME environment variable is required "
                "(project:region:instance)"
            )
        if not db_user:
            raise ValueError(
                "DB_USER environment variable is required (IAM service account)"
            )

        cls._connector = Connector()

        def getconn():
            assert cls._connector is not None
            return cls._connector.connect(
                instance_connection_name,
                "pg8000",
                user=db_user,
                db=db_name,
                enable_iam_auth=True,
            )

        cls._engine = create_engine(
            "postgresql+pg8000://",
            creator=getconn,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
        )
        cls._session_factory = sessionmaker(bind=cls._engine)
        cls._initialized = True

    @classmethod
    def get_engine(cls) -> Engine:
        if not cls._initialized or cls._engine is None:
            raise RuntimeError("Order store database is not connected")
        return cls._engine

    @classmethod
    def get_session(cls) -> Session:
        """New session; the caller commits or rolls back and closes it."""
        if not cls._initialized or cls._session_factory is None:
            raise RuntimeError("Order store database is not connected")
        return cls._session_factory()

    @classmethod
    def close(cls):
        """Dispose of the pool and the connector. Safe to call when not open."""
        if cls._engine:
            cls._engine.dispose()
            cls._engine = None
        if cls._connector:
            cls._connector.close()
            cls._connector = None
        cls._session_factory = None
        cls._initialized = False
