"""Order management endpoints.

These endpoints let scenario collaborators create, inspect, transition
and delete orders, and attach lines to them.
"""

import uuid
from typing import Optional

from fastapi import APIRouter, status

from api.dependencies import RecordStoreDep
from api.models import CreateLineRequest, CreateOrderRequest, DeleteResponse
from models.order import Order, OrderLine, OrderStatus

# Create router for order-related endpoints
router = APIRouter(
    prefix="/orders",
    tags=["orders"],
)


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED)
async def create_order(request: CreateOrderRequest, store: RecordStoreDep):
    """Create a new open order.

    A reference is generated when none is supplied. Passing ``parent_id``
    creates the order as a child of an existing order.

    Returns:
        The created order.

    Raises:
        RecordNotFoundError: If parent_id doesn't match an order (404).
    """
    reference = request.reference or f"ORD-{uuid.uuid4().hex[:8].upper()}"
    return store.create_order(reference=reference, parent_id=request.parent_id)


@router.get("", response_model=list[Order])
async def list_orders(
    store: RecordStoreDep,
    status: Optional[OrderStatus] = None,
    parent_id: Optional[uuid.UUID] = None,
):
    """List orders, optionally filtered by status or parent."""
    return store.list_orders(status=status, parent_id=parent_id)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: uuid.UUID, store: RecordStoreDep):
    """Get the current state of a single order."""
    return store.get_order(order_id)


@router.post("/{order_id}/close", response_model=Order)
async def close_order(order_id: uuid.UUID, store: RecordStoreDep):
    """Close an open order.

    Raises:
        RecordStateError: If the order is not open (409).
    """
    return store.set_order_status(order_id, OrderStatus.CLOSED)


@router.post("/{order_id}/cancel", response_model=Order)
async def cancel_order(order_id: uuid.UUID, store: RecordStoreDep):
    """Cancel an open order.

    Raises:
        RecordStateError: If the order is not open (409).
    """
    return store.set_order_status(order_id, OrderStatus.CANCELLED)


@router.delete("/{order_id}", response_model=DeleteResponse)
async def delete_order(order_id: uuid.UUID, store: RecordStoreDep):
    """Delete an order and all of its lines."""
    lines_deleted = store.delete_order(order_id)
    return DeleteResponse(deleted=True, id=order_id, lines_deleted=lines_deleted)


@router.post(
    "/{order_id}/lines",
    response_model=OrderLine,
    status_code=status.HTTP_201_CREATED,
)
async def add_line(order_id: uuid.UUID, request: CreateLineRequest, store: RecordStoreDep):
    """Add a line to an open order.

    Raises:
        RecordNotFoundError: If the order doesn't exist (404).
        RecordStateError: If the order is closed or cancelled (409).
    """
    return store.add_line(order_id, product=request.product, quantity=request.quantity)


@router.get("/{order_id}/lines", response_model=list[OrderLine])
async def list_lines(order_id: uuid.UUID, store: RecordStoreDep):
    """List the lines of an order in the order they were added."""
    return store.list_lines(order_id)
