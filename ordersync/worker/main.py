"""
ordersync Worker API - Main FastAPI Application.

Processes queued BigCommerce orders in batches.
"""

import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from ordersync import __version__
from ordersync.config import load_settings
from ordersync.errors import ConfigurationError
from ordersync.utils.logging import setup_logging

# Load environment variables
load_dotenv()

# Configure logging early
setup_logging("ordersync-worker")

logger = logging.getLogger(__name__)


def _init_database() -> None:
    """Connect to Cloud SQL. The order store is required, so this fails fast."""
    from ordersync.db import DatabaseConnection

    if not os.getenv("INSTANCE_CONNECTION_NAME"):
        raise ConfigurationError(
            "Database not configured: INSTANCE_CONNECTION_NAME is not set"
        )

    try:
        DatabaseConnection.initialize()
    except ValueError as e:
        raise ConfigurationError(f"Database not configured: {e}") from e
    logger.info("Database: Connected to Cloud SQL")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build clients on startup and release them on shutdown."""
    from ordersync.db import DatabaseConnection
    from ordersync.worker.context import build_context

    logger.info("Starting ordersync worker...")
    logger.info(f"Environment: {os.getenv('GOOGLE_CLOUD_PROJECT', 'local')}")

    settings = load_settings()
    _init_database()
    try:
        app.state.context = build_context(settings)
        try:
            yield
        finally:
            app.state.context.close()
            app.state.context = None
    finally:
        DatabaseConnection.close()
        logger.info("Database: Connection closed")

    logger.info("Shutting down ordersync worker...")


app = FastAPI(
    title="ordersync Worker API",
    description="Background worker that enriches, stores and announces queued orders",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Root endpoint - service information."""
    return {
        "service": "ordersync Worker API",
        "version": __version__,
        "status": "operational",
        "description": "Order batch processing worker",
    }


@app.get("/health")
async def health_check():
    """
    Health check endpoint for Cloud Run.

    Returns:
        dict: Health status
    """
    return {
        "status": "healthy",
        "service": "ordersync-worker",
        "environment": os.getenv("GOOGLE_CLOUD_PROJECT", "local"),
    }


from ordersync.worker.routes import tasks

app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
