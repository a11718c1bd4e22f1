"""Order sub-client for the record store client.

This module provides the OrdersClient, which wraps the /orders endpoints
and returns typed Order and OrderLine models.

This is an internal module. Import from `client` instead.
"""

import uuid
from typing import Optional

from client._base import BaseClient
from client.models import DeleteResponse, Order, OrderLine, OrderStatus


class OrdersClient(BaseClient):
    """Synchronous client for order endpoints (/orders/*).

    Example:
        with RecordStoreClient() as client:
            order = client.orders.create(reference="ORD-1")
            client.orders.add_line(order.id, product="widget", quantity=2)
            client.orders.close(order.id)
    """

    _BASE_PATH = "/orders"

    def create(
        self,
        reference: Optional[str] = None,
        parent_id: Optional[uuid.UUID] = None,
    ) -> Order:
        """Create a new open order.

        Args:
            reference: Human-readable reference; the store generates one if omitted.
            parent_id: Optional parent order identifier.

        Returns:
            The created order.

        Raises:
            NotFoundError: If parent_id doesn't match an order.
        """
        body: dict = {}
        if reference is not None:
            body["reference"] = reference
        if parent_id is not None:
            body["parent_id"] = str(parent_id)
        data = self._post(self._BASE_PATH, json=body)
        return Order(**data)

    def get(self, order_id: uuid.UUID) -> Order:
        """Get the current state of an order.

        Raises:
            NotFoundError: If the order doesn't exist.
        """
        data = self._get(f"{self._BASE_PATH}/{order_id}")
        return Order(**data)

    def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        parent_id: Optional[uuid.UUID] = None,
    ) -> list[Order]:
        """List orders, optionally filtered by status or parent."""
        params = {
            "status": status.value if status is not None else None,
            "parent_id": str(parent_id) if parent_id is not None else None,
        }
        data = self._get(self._BASE_PATH, params=params)
        return [Order(**item) for item in data]

    def close(self, order_id: uuid.UUID) -> Order:
        """Close an open order.

        Raises:
            ConflictError: If the order is not open.
        """
        data = self._post(f"{self._BASE_PATH}/{order_id}/close")
        return Order(**data)

    def cancel(self, order_id: uuid.UUID) -> Order:
        """Cancel an open order.

        Raises:
            ConflictError: If the order is not open.
        """
        data = self._post(f"{self._BASE_PATH}/{order_id}/cancel")
        return Order(**data)

    def delete(self, order_id: uuid.UUID) -> DeleteResponse:
        """Delete an order and all of its lines."""
        data = self._delete(f"{self._BASE_PATH}/{order_id}")
        return DeleteResponse(**data)

    def add_line(self, order_id: uuid.UUID, product: str, quantity: int = 1) -> OrderLine:
        """Add a line to an open order.

        Raises:
            NotFoundError: If the order doesn't exist.
            ConflictError: If the order is closed or cancelled.
        """
        data = self._post(
            f"{self._BASE_PATH}/{order_id}/lines",
            json={"product": product, "quantity": quantity},
        )
        return OrderLine(**data)

    def lines(self, order_id: uuid.UUID) -> list[OrderLine]:
        """List the lines of an order."""
        data = self._get(f"{self._BASE_PATH}/{order_id}/lines")
        return [OrderLine(**item) for item in data]
