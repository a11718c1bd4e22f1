"""Tests for the OrdersClient and LinesClient against the in-process app.

Requests go through a SyncTestTransport, so these tests cover the typed
client, the routes and the store together.
"""

import uuid

import pytest

from client import ConflictError, NotFoundError, Order, OrderLine, OrderStatus, ValidationError


# =============================================================================
# OrdersClient
# =============================================================================

class TestOrdersClientCreate:
    """Tests for OrdersClient.create."""

    def test_returns_typed_order(self, store_client):
        order = store_client.orders.create(reference="ORD-42")

        assert isinstance(order, Order)
        assert order.reference == "ORD-42"
        assert order.status == OrderStatus.OPEN
        assert order.is_open

    def test_child_order_keeps_parent(self, store_client):
        parent = store_client.orders.create()
        child = store_client.orders.create(parent_id=parent.id)

        assert child.parent_id == parent.id

    def test_unknown_parent_raises_not_found(self, store_client):
        missing = uuid.uuid4()

        with pytest.raises(NotFoundError) as exc_info:
            store_client.orders.create(parent_id=missing)

        assert exc_info.value.resource_type == "order"
        assert exc_info.value.resource_id == str(missing)


class TestOrdersClientQueries:
    """Tests for OrdersClient.get and list_orders."""

    def test_get_round_trips_order(self, store_client):
        created = store_client.orders.create(reference="ORD-1")
        assert store_client.orders.get(created.id) == created

    def test_get_missing_raises_not_found(self, store_client):
        with pytest.raises(NotFoundError):
            store_client.orders.get(uuid.uuid4())

    def test_list_orders_filters(self, store_client):
        parent = store_client.orders.create()
        child = store_client.orders.create(parent_id=parent.id)
        store_client.orders.cancel(child.id)

        cancelled = store_client.orders.list_orders(status=OrderStatus.CANCELLED)
        children = store_client.orders.list_orders(parent_id=parent.id)

        assert [o.id for o in cancelled] == [child.id]
        assert [o.id for o in children] == [child.id]
        assert len(store_client.orders.list_orders()) == 2


class TestOrdersClientTransitions:
    """Tests for close and cancel."""

    def test_close(self, store_client):
        order = store_client.orders.create()
        assert store_client.orders.close(order.id).status == OrderStatus.CLOSED

    def test_closing_twice_conflicts(self, store_client):
        order = store_client.orders.create()
        store_client.orders.close(order.id)

        with pytest.raises(ConflictError) as exc_info:
            store_client.orders.close(order.id)

        assert exc_info.value.status_code == 409


class TestOrdersClientLines:
    """Tests for line operations."""

    def test_add_line_and_list(self, store_client):
        order = store_client.orders.create()

        line = store_client.orders.add_line(order.id, product="widget", quantity=2)

        assert isinstance(line, OrderLine)
        assert line.order_id == order.id
        assert store_client.orders.lines(order.id) == [line]
        assert store_client.lines.get(line.id) == line

    def test_invalid_quantity_raises_validation_error(self, store_client):
        order = store_client.orders.create()
        with pytest.raises(ValidationError):
            store_client.orders.add_line(order.id, product="widget", quantity=0)

    def test_delete_line(self, store_client):
        order = store_client.orders.create()
        line = store_client.orders.add_line(order.id, product="widget")

        result = store_client.lines.delete(line.id)

        assert result.deleted is True
        assert store_client.orders.lines(order.id) == []

    def test_delete_order_reports_cascaded_lines(self, store_client):
        order = store_client.orders.create()
        store_client.orders.add_line(order.id, product="a")

        result = store_client.orders.delete(order.id)

        assert result.lines_deleted == 1
        with pytest.raises(NotFoundError):
            store_client.orders.get(order.id)


class TestRecordStoreClient:
    def test_health(self, store_client):
        assert store_client.health() == {"status": "healthy"}

    def test_sub_clients_are_cached(self, store_client):
        assert store_client.orders is store_client.orders
        assert store_client.lines is store_client.lines
