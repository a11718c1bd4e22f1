"""In-memory record store backing the sample API."""

import logging
import threading
import uuid
from typing import Optional

from models.order import Order, OrderLine, OrderStatus

logger = logging.getLogger(__name__)


class RecordNotFoundError(LookupError):
    """Raised when a requested record doesn't exist in the store.

    Args:
        record_type: Kind of record that was requested ("order", "line").
        record_id: The identifier that wasn't found.
    """

    def __init__(self, record_type: str, record_id: uuid.UUID):
        self.record_type = record_type
        self.record_id = record_id
        super().__init__(f"{record_type.capitalize()} '{record_id}' not found")


class RecordStateError(ValueError):
    """Raised when an operation conflicts with a record's current state."""


class RecordStore:
    """Thread-safe in-memory store of orders and their lines.

    Many test sessions may share one store concurrently, so every
    operation runs under a single lock. Returned records are copies taken
    while the lock is held; callers cannot mutate stored state directly.
    """

    def __init__(self) -> None:
        self._orders: dict[uuid.UUID, Order] = {}
        self._lines: dict[uuid.UUID, OrderLine] = {}
        self._lock = threading.Lock()

    # ===== Orders =====

    def create_order(self, reference: str, parent_id: Optional[uuid.UUID] = None) -> Order:
        """Create a new open order.

        Args:
            reference: Human-readable order reference.
            parent_id: Optional parent order identifier.

        Returns:
            The created order.

        Raises:
            RecordNotFoundError: If parent_id doesn't match an order.
        """
        with self._lock:
            if parent_id is not None and parent_id not in self._orders:
                raise RecordNotFoundError("order", parent_id)
            order = Order(reference=reference, parent_id=parent_id)
            self._orders[order.id] = order
            created = order.model_copy()
        logger.info(f"Created order {order.id} (parent: {parent_id})")
        return created

    def get_order(self, order_id: uuid.UUID) -> Order:
        with self._lock:
            return self._require_order(order_id).model_copy()

    def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        parent_id: Optional[uuid.UUID] = None,
    ) -> list[Order]:
        """List orders in creation order, optionally filtered."""
        with self._lock:
            return [
                o.model_copy()
                for o in self._orders.values()
                if (status is None or o.status == status)
                and (parent_id is None or o.parent_id == parent_id)
            ]

    def set_order_status(self, order_id: uuid.UUID, status: OrderStatus) -> Order:
        """Move an open order to a closed or cancelled status.

        Raises:
            RecordNotFoundError: If the order doesn't exist.
            RecordStateError: If the order is no longer open.
        """
        with self._lock:
            order = self._require_order(order_id)
            try:
                order.transition(status)
            except ValueError as e:
                raise RecordStateError(str(e)) from e
            updated = order.model_copy()
        logger.info(f"Order {order_id} is now {status.value}")
        return updated

    def delete_order(self, order_id: uuid.UUID) -> int:
        """Delete an order together with its lines.

        Returns:
            Number of lines removed alongside the order.

        Raises:
            RecordNotFoundError: If the order doesn't exist.
        """
        with self._lock:
            self._require_order(order_id)
            del self._orders[order_id]
            line_ids = [lid for lid, line in self._lines.items() if line.order_id == order_id]
            for line_id in line_ids:
                del self._lines[line_id]
        logger.info(f"Deleted order {order_id} and {len(line_ids)} lines")
        return len(line_ids)

    # ===== Lines =====

    def add_line(self, order_id: uuid.UUID, product: str, quantity: int = 1) -> OrderLine:
        """Add a line to an open order.

        Raises:
            RecordNotFoundError: If the order doesn't exist.
            RecordStateError: If the order is not open.
        """
        with self._lock:
            order = self._require_order(order_id)
            if not order.is_open:
                raise RecordStateError(
                    f"Order {order_id} is {order.status.value}; lines can only be added to open orders"
                )
            line = OrderLine(order_id=order_id, product=product, quantity=quantity)
            self._lines[line.id] = line
            added = line.model_copy()
        logger.info(f"Added line {line.id} to order {order_id}")
        return added

    def get_line(self, line_id: uuid.UUID) -> OrderLine:
        with self._lock:
            line = self._lines.get(line_id)
            if line is None:
                raise RecordNotFoundError("line", line_id)
            return line.model_copy()

    def list_lines(self, order_id: uuid.UUID) -> list[OrderLine]:
        with self._lock:
            self._require_order(order_id)
            return [line.model_copy() for line in self._lines.values() if line.order_id == order_id]

    def delete_line(self, line_id: uuid.UUID) -> None:
        with self._lock:
            if line_id not in self._lines:
                raise RecordNotFoundError("line", line_id)
            del self._lines[line_id]
        logger.info(f"Deleted line {line_id}")

    # ===== Housekeeping =====

    def clear(self) -> None:
        """Remove every record from the store."""
        with self._lock:
            self._orders.clear()
            self._lines.clear()

    @property
    def order_count(self) -> int:
        return len(self._orders)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def _require_order(self, order_id: uuid.UUID) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise RecordNotFoundError("order", order_id)
        return order
