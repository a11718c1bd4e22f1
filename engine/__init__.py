"""Fluent record orchestration engine.

This package contains the RecordService session and the collaborator
contracts it calls. It holds no domain logic, I/O or persistence; record
creation, assertion, actions and cleanup are supplied by the caller.
"""

from engine.exceptions import (
    DuplicateRecordError,
    FluentTestingError,
    MissingRecordError,
    PreconditionError,
    RecordTypeMismatchError,
)
from engine.interfaces import (
    BaseValidator,
    ExecutableAction,
    ExecutableAggregateAction,
    RecordCleanup,
    RecordCreator,
    RelatedRecordCreator,
    RelatedValueRecordCreator,
    Specification,
    SpecificationValidator,
)
from engine.record import Record
from engine.record_service import RecordService

__all__ = [
    "RecordService",
    "Record",
    "RecordCreator",
    "RelatedRecordCreator",
    "RelatedValueRecordCreator",
    "SpecificationValidator",
    "BaseValidator",
    "Specification",
    "ExecutableAction",
    "ExecutableAggregateAction",
    "RecordCleanup",
    "FluentTestingError",
    "PreconditionError",
    "MissingRecordError",
    "DuplicateRecordError",
    "RecordTypeMismatchError",
]
