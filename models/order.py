"""Order and order line records held by the sample record store."""

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"


class Order(BaseModel):
    """A single order record.

    Orders may form a hierarchy through ``parent_id``. Only open orders
    accept new lines or status changes.

    Args:
        id: Unique identifier assigned by the store.
        reference: Human-readable order reference.
        status: Current lifecycle status.
        parent_id: Identifier of the parent order, if any.
        created_at: When the order was created.
        updated_at: When the order was last modified.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4, description="Unique order identifier")
    reference: str = Field(description="Human-readable order reference")
    status: OrderStatus = Field(default=OrderStatus.OPEN, description="Lifecycle status")
    parent_id: Optional[uuid.UUID] = Field(default=None, description="Parent order identifier")
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)

    @field_validator("reference")
    @classmethod
    def validate_reference(cls, v: str) -> str:
        """Validate that reference is non-empty.

        Raises:
            ValueError: If reference is empty or whitespace.
        """
        if not v or not v.strip():
            raise ValueError("reference cannot be empty")
        return v

    @property
    def is_open(self) -> bool:
        return self.status == OrderStatus.OPEN

    def transition(self, status: OrderStatus) -> None:
        """Move an open order to a new status.

        Args:
            status: The target status.

        Raises:
            ValueError: If the order is no longer open.
        """
        if not self.is_open:
            raise ValueError(
                f"Order {self.id} is {self.status.value}; only open orders can be {status.value}"
            )
        self.status = status
        self.updated_at = _utcnow()


class OrderLine(BaseModel):
    """A product line belonging to an order.

    Args:
        id: Unique identifier assigned by the store.
        order_id: Identifier of the owning order.
        product: Product name or SKU.
        quantity: Number of units, at least one.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    order_id: uuid.UUID
    product: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)
    created_at: datetime = Field(default_factory=_utcnow)
