"""Record store client library.

This module provides a typed Python client for the sample record store
REST API. Scenario collaborators use it to create, act on, read and
delete records.

Example:
    from client import RecordStoreClient

    with RecordStoreClient(base_url="http://localhost:8000") as client:
        order = client.orders.create()
        line = client.orders.add_line(order.id, product="widget")
        client.orders.close(order.id)

Exports:
    RecordStoreClient: Synchronous client for the record store.

    Exceptions:
        RecordStoreClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Record not found (HTTP 404).
        ConflictError: Record state conflict (HTTP 409).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._lines import LinesClient
from client._orders import OrdersClient
from client.client import RecordStoreClient
from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    RecordStoreClientError,
    ServerError,
    TimeoutError,
    ValidationError,
)
from client.models import DeleteResponse, Order, OrderLine, OrderStatus

__all__ = [
    # Main client
    "RecordStoreClient",
    # Sub-clients
    "OrdersClient",
    "LinesClient",
    # Models
    "Order",
    "OrderLine",
    "OrderStatus",
    "DeleteResponse",
    # Exceptions
    "RecordStoreClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
