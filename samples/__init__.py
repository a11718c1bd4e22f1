"""Sample collaborators for scenarios against the record store.

These classes show how creators, specifications, actions and cleanup
plug into a RecordService. None of them are part of the engine.
"""

from samples.actions import CancelOrder, CloseOrder
from samples.cleanup import DeleteCreatedRecords
from samples.config import RecordStoreSettings
from samples.orders import OrderConfiguration, OrderLineConfiguration
from samples.specifications import (
    MustBeCancelled,
    MustBeClosed,
    MustBeOpen,
    MustHaveLineCount,
    MustHaveParent,
    MustHaveReference,
    MustHaveStatus,
    OrderSpecification,
)

__all__ = [
    "RecordStoreSettings",
    "OrderConfiguration",
    "OrderLineConfiguration",
    "CloseOrder",
    "CancelOrder",
    "DeleteCreatedRecords",
    "OrderSpecification",
    "MustBeOpen",
    "MustBeClosed",
    "MustBeCancelled",
    "MustHaveStatus",
    "MustHaveReference",
    "MustHaveParent",
    "MustHaveLineCount",
]
