"""Client response models for the record store client.

This module re-exports the record models and response envelopes from the
store so client users can import everything from one place.
"""

from api.models import DeleteResponse
from models.order import Order, OrderLine, OrderStatus

__all__ = [
    "DeleteResponse",
    "Order",
    "OrderLine",
    "OrderStatus",
]
