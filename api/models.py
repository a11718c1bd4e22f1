"""Request and response models for the record store endpoints.

Records themselves (Order, OrderLine) are returned as-is; this module only
holds the request bodies and the small envelope responses around them.
"""

import uuid
from typing import Any, Optional

from pydantic import BaseModel, Field


class CreateOrderRequest(BaseModel):
    """Request model for creating an order.

    Attributes:
        reference: Human-readable reference; generated when omitted.
        parent_id: Optional parent order identifier.
    """

    reference: Optional[str] = Field(default=None, min_length=1)
    parent_id: Optional[uuid.UUID] = None


class CreateLineRequest(BaseModel):
    """Request model for adding a line to an order.

    Attributes:
        product: Product name or SKU.
        quantity: Number of units (at least one).
    """

    product: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)


class DeleteResponse(BaseModel):
    """Response model for record deletion.

    Attributes:
        deleted: Whether the record was removed.
        id: Identifier of the removed record.
        lines_deleted: Lines removed with an order (orders only).
    """

    deleted: bool
    id: uuid.UUID
    lines_deleted: int = 0


class ErrorResponse(BaseModel):
    """Error body returned by every exception handler.

    Attributes:
        error: Short title of the error category.
        detail: Human-readable description.
        type: Record type for 404s, otherwise the exception class name.
        record_id: Identifier that wasn't found (404 only).
        validation_errors: Field errors from pydantic (422 only).
    """

    error: str
    detail: str
    type: Optional[str] = None
    record_id: Optional[str] = None
    validation_errors: Optional[list[dict[str, Any]]] = None
