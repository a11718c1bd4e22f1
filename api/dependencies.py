"""Dependency injection providers for the FastAPI application.

This module defines dependencies that can be injected into route handlers,
providing access to the shared RecordStore.
"""

from typing import Annotated

from fastapi import Depends

from models.store import RecordStore


# Global state
# A single shared store is created when the app starts; tests override
# get_record_store to inject their own instance
_record_store: RecordStore | None = None


def get_record_store() -> RecordStore:
    """Get the shared RecordStore instance.

    Returns:
        The shared RecordStore instance.

    Raises:
        RuntimeError: If the store hasn't been initialized yet.

    Example:
        @router.get("/orders/{order_id}")
        async def get_order(order_id: UUID, store: RecordStoreDep):
            return store.get_order(order_id)
    """
    if _record_store is None:
        raise RuntimeError(
            "RecordStore not initialized. Call initialize_record_store() first."
        )

    return _record_store


def initialize_record_store() -> RecordStore:
    """Initialize the shared RecordStore instance.

    This should be called once when the FastAPI app starts up.

    Returns:
        The newly created, empty RecordStore.
    """
    global _record_store

    _record_store = RecordStore()
    return _record_store


def shutdown_record_store() -> None:
    """Discard the shared RecordStore and everything it holds."""
    global _record_store

    if _record_store is not None:
        _record_store.clear()

    _record_store = None


# Type alias for dependency injection
RecordStoreDep = Annotated[RecordStore, Depends(get_record_store)]
