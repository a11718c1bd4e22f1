"""Sample record store data models.

This package contains the records held by the sample record store and the
thread-safe in-memory store itself.
"""

from models.order import Order, OrderLine, OrderStatus
from models.store import RecordNotFoundError, RecordStateError, RecordStore

__all__ = [
    "Order",
    "OrderLine",
    "OrderStatus",
    "RecordStore",
    "RecordNotFoundError",
    "RecordStateError",
]
