"""Validators and specifications for orders.

Each SpecificationValidator checks exactly one property. Specifications
combine a live read of the order from the record store with an ordered
list of those checks.

Example:
    RecordService(root_id).create(OrderConfiguration(client)).reassign_root() \\
        .assert_against(MustBeOpen(client))
"""

import uuid
from typing import Optional

from client import Order, OrderStatus, RecordStoreClient
from engine import BaseValidator, SpecificationValidator


class MustHaveStatus(SpecificationValidator[Order]):
    """Assert the order is in the given status."""

    def __init__(self, status: OrderStatus) -> None:
        self.status = status

    def validate(self, record: Order) -> None:
        assert record.status == self.status, (
            f"Order {record.id} should be {self.status.value} but is {record.status.value}"
        )


class MustHaveReference(SpecificationValidator[Order]):
    """Assert the order carries a reference, optionally a specific one."""

    def __init__(self, reference: Optional[str] = None) -> None:
        self.reference = reference

    def validate(self, record: Order) -> None:
        assert record.reference, f"Order {record.id} has no reference"
        if self.reference is not None:
            assert record.reference == self.reference, (
                f"Order {record.id} reference is {record.reference!r}, expected {self.reference!r}"
            )


class MustHaveParent(SpecificationValidator[Order]):
    """Assert the order is a child order, optionally of a specific parent."""

    def __init__(self, parent_id: Optional[uuid.UUID] = None) -> None:
        self.parent_id = parent_id

    def validate(self, record: Order) -> None:
        assert record.parent_id is not None, f"Order {record.id} has no parent"
        if self.parent_id is not None:
            assert record.parent_id == self.parent_id, (
                f"Order {record.id} parent is {record.parent_id}, expected {self.parent_id}"
            )


class MustHaveLineCount(SpecificationValidator[Order]):
    """Assert the order has exactly ``expected`` lines in the store."""

    def __init__(self, client: RecordStoreClient, expected: int) -> None:
        self._client = client
        self.expected = expected

    def validate(self, record: Order) -> None:
        count = len(self._client.orders.lines(record.id))
        assert count == self.expected, (
            f"Order {record.id} has {count} lines, expected {self.expected}"
        )


class OrderSpecification(BaseValidator[uuid.UUID, Order]):
    """Base specification that re-reads the order from the record store."""

    def __init__(self, client: RecordStoreClient) -> None:
        self._client = client

    def get_record(self, record_id: uuid.UUID) -> Order:
        return self._client.orders.get(record_id)


class MustBeOpen(OrderSpecification):
    """The order is open and has a reference."""

    def get_validators(self) -> list[SpecificationValidator[Order]]:
        return [
            MustHaveStatus(OrderStatus.OPEN),
            MustHaveReference(),
        ]


class MustBeClosed(OrderSpecification):
    """The order has been closed."""

    def get_validators(self) -> list[SpecificationValidator[Order]]:
        return [MustHaveStatus(OrderStatus.CLOSED)]


class MustBeCancelled(OrderSpecification):
    """The order has been cancelled."""

    def get_validators(self) -> list[SpecificationValidator[Order]]:
        return [MustHaveStatus(OrderStatus.CANCELLED)]
