"""Unit tests for the Order model and the in-memory RecordStore."""

import threading
import uuid

import pytest
from pydantic import ValidationError

from models.order import Order, OrderLine, OrderStatus
from models.store import RecordNotFoundError, RecordStateError, RecordStore


# =============================================================================
# Order model
# =============================================================================

class TestOrder:
    """Test Order validation and status transitions."""

    def test_defaults(self):
        order = Order(reference="ORD-1")

        assert order.status == OrderStatus.OPEN
        assert order.parent_id is None
        assert order.is_open

    def test_blank_reference_rejected(self):
        with pytest.raises(ValidationError, match="reference cannot be empty"):
            Order(reference="   ")

    def test_transition_updates_timestamp(self):
        order = Order(reference="ORD-1")
        before = order.updated_at

        order.transition(OrderStatus.CLOSED)

        assert order.status == OrderStatus.CLOSED
        assert order.updated_at >= before

    def test_only_open_orders_transition(self):
        order = Order(reference="ORD-1", status=OrderStatus.CANCELLED)
        with pytest.raises(ValueError, match="only open orders can be closed"):
            order.transition(OrderStatus.CLOSED)

    def test_line_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            OrderLine(order_id=uuid.uuid4(), product="widget", quantity=0)


# =============================================================================
# RecordStore
# =============================================================================

class TestRecordStoreOrders:
    """Test order operations on RecordStore."""

    def test_create_and_get(self):
        store = RecordStore()
        order = store.create_order("ORD-1")

        assert store.get_order(order.id) == order
        assert store.order_count == 1

    def test_returns_copies(self):
        store = RecordStore()
        order = store.create_order("ORD-1")

        order.status = OrderStatus.CLOSED

        assert store.get_order(order.id).status == OrderStatus.OPEN

    def test_unknown_parent(self):
        store = RecordStore()
        missing = uuid.uuid4()

        with pytest.raises(RecordNotFoundError) as exc_info:
            store.create_order("ORD-1", parent_id=missing)

        assert exc_info.value.record_type == "order"
        assert exc_info.value.record_id == missing
        assert store.order_count == 0

    def test_missing_order_message(self):
        order_id = uuid.uuid4()
        with pytest.raises(RecordNotFoundError, match=f"Order '{order_id}' not found"):
            RecordStore().get_order(order_id)

    def test_set_status_twice_conflicts(self):
        store = RecordStore()
        order = store.create_order("ORD-1")
        store.set_order_status(order.id, OrderStatus.CANCELLED)

        with pytest.raises(RecordStateError):
            store.set_order_status(order.id, OrderStatus.CLOSED)

    def test_list_orders_keeps_creation_order(self):
        store = RecordStore()
        ids = [store.create_order(f"ORD-{i}").id for i in range(3)]
        assert [o.id for o in store.list_orders()] == ids

    def test_delete_order_cascades(self):
        store = RecordStore()
        order = store.create_order("ORD-1")
        other = store.create_order("ORD-2")
        store.add_line(order.id, "a")
        store.add_line(order.id, "b")
        kept = store.add_line(other.id, "c")

        assert store.delete_order(order.id) == 2
        assert store.order_count == 1
        assert store.list_lines(other.id) == [kept]


class TestRecordStoreLines:
    """Test line operations on RecordStore."""

    def test_add_line_to_closed_order(self):
        store = RecordStore()
        order = store.create_order("ORD-1")
        store.set_order_status(order.id, OrderStatus.CLOSED)

        with pytest.raises(RecordStateError, match="lines can only be added to open orders"):
            store.add_line(order.id, "widget")

    def test_delete_missing_line(self):
        with pytest.raises(RecordNotFoundError) as exc_info:
            RecordStore().delete_line(uuid.uuid4())
        assert exc_info.value.record_type == "line"

    def test_clear(self):
        store = RecordStore()
        order = store.create_order("ORD-1")
        store.add_line(order.id, "widget")

        store.clear()

        assert store.order_count == 0
        assert store.line_count == 0

    def test_concurrent_line_adds(self):
        store = RecordStore()
        order = store.create_order("ORD-1")

        threads = [
            threading.Thread(target=store.add_line, args=(order.id, f"p{i}"))
            for i in range(20)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(store.list_lines(order.id)) == 20


class TestRecordStoreCopies:
    """Copies handed out by the store are taken under its lock."""

    def test_every_read_and_write_copies_under_lock(self, monkeypatch):
        store = RecordStore()
        held = []
        original_copy = Order.model_copy

        def checked_copy(self, *args, **kwargs):
            held.append(store._lock.locked())
            return original_copy(self, *args, **kwargs)

        monkeypatch.setattr(Order, "model_copy", checked_copy)

        order = store.create_order("ORD-1")
        store.create_order("ORD-2", parent_id=order.id)
        store.get_order(order.id)
        store.list_orders()
        store.list_orders(parent_id=order.id)
        store.set_order_status(order.id, OrderStatus.CLOSED)

        assert len(held) == 7
        assert all(held)

    def test_list_filters_apply_together(self):
        store = RecordStore()
        parent = store.create_order("ORD-1")
        open_child = store.create_order("ORD-2", parent_id=parent.id)
        closed_child = store.create_order("ORD-3", parent_id=parent.id)
        store.set_order_status(closed_child.id, OrderStatus.CLOSED)

        result = store.list_orders(status=OrderStatus.OPEN, parent_id=parent.id)

        assert [o.id for o in result] == [open_child.id]
