"""Unit tests for the record store dependency providers in api/dependencies.py."""

import pytest

from api.dependencies import (
    get_record_store,
    initialize_record_store,
    shutdown_record_store,
)
from models.store import RecordStore


# =============================================================================
# Test Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_global_store():
    """Reset the global store before and after each test."""
    import api.dependencies as deps

    original_store = deps._record_store
    deps._record_store = None

    yield

    deps._record_store = original_store


# =============================================================================
# Provider Tests
# =============================================================================


class TestGetRecordStore:
    """Tests for get_record_store."""

    def test_raises_runtime_error_when_not_initialized(self):
        with pytest.raises(RuntimeError) as exc_info:
            get_record_store()

        assert "RecordStore not initialized" in str(exc_info.value)
        assert "initialize_record_store()" in str(exc_info.value)

    def test_returns_same_instance_after_initialization(self):
        created = initialize_record_store()

        assert isinstance(created, RecordStore)
        assert get_record_store() is created
        assert get_record_store() is get_record_store()


class TestShutdownRecordStore:
    """Tests for shutdown_record_store."""

    def test_clears_and_discards_store(self):
        store = initialize_record_store()
        store.create_order("ORD-1")

        shutdown_record_store()

        assert store.order_count == 0
        with pytest.raises(RuntimeError):
            get_record_store()

    def test_shutdown_without_store_is_noop(self):
        shutdown_record_store()
        shutdown_record_store()
