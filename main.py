"""Main entry point for the sample record store FastAPI application.

The record store is the external system that the sample scenario
collaborators create, act on, assert against and clean up.

To run the development server:
    uvicorn main:app --reload

To run in production:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from api.dependencies import initialize_record_store, shutdown_record_store
from api.exceptions import (
    generic_exception_handler,
    record_not_found_handler,
    record_state_handler,
    validation_exception_handler,
    value_error_handler,
)
from api.routes import lines as lines_routes
from api.routes import orders as orders_routes
from models.store import RecordNotFoundError, RecordStateError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events.

    Creates the shared RecordStore at startup and discards it at shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to FastAPI to handle requests.
    """
    logger.info("Starting record store")
    initialize_record_store()

    yield

    logger.info("Shutting down record store")
    shutdown_record_store()


app = FastAPI(
    title="Fluent Records Sample Store",
    description="In-memory record store used by fluent record scenarios",
    version="0.1.0",
    lifespan=lifespan,
)

# Register exception handlers
# Handlers are matched on the exception's MRO, most specific first
app.add_exception_handler(RecordNotFoundError, record_not_found_handler)
app.add_exception_handler(RecordStateError, record_state_handler)
app.add_exception_handler(ValidationError, validation_exception_handler)
app.add_exception_handler(ValueError, value_error_handler)
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(orders_routes.router)
app.include_router(lines_routes.router)


@app.get("/")
async def root():
    """Root endpoint - returns a welcome message."""
    return {
        "message": "Fluent Records Sample Store",
        "version": "0.1.0",
        "docs_url": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
