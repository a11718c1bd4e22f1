"""Exception hierarchy for the record orchestration engine.

Only misuse of the session itself is reported through these classes.
Failures raised by creators, validators, actions or cleanup collaborators
are never wrapped and reach the caller unchanged.

Exception Hierarchy:
    FluentTestingError (base)
    ├── PreconditionError - Step called in a state it cannot handle
    │   ├── MissingRecordError - Step needs a prior record but none exists
    │   └── DuplicateRecordError - Creator returned an identifier already tracked
    └── RecordTypeMismatchError - Last record is not the expected parent type

Example:
    Catching a broken chain::

        try:
            RecordService(root_id).create_related(LineCreator())
        except MissingRecordError as e:
            print(f"{e.operation} needs a prior record")
"""

from typing import Any


class FluentTestingError(Exception):
    """Base exception for all engine errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class PreconditionError(FluentTestingError):
    """A step was invoked while the session could not satisfy it.

    Raised before any collaborator is called, so nothing has been
    created or mutated when this surfaces.

    Attributes:
        message: Human-readable error description.
        operation: Name of the session step that was refused.
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        self.operation = operation
        super().__init__(message)

    def __str__(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class MissingRecordError(PreconditionError):
    """A step needs the most recently created record but none exists.

    Example:
        RecordService(root).act(CloseOrder(client))  # nothing created yet
    """

    def __init__(self, operation: str) -> None:
        super().__init__(
            f"missing prior record: '{operation}' requires at least one created record",
            operation=operation,
        )


class DuplicateRecordError(PreconditionError):
    """A creator returned an identifier the session already tracks.

    Entries are never overwritten because that would change which
    record counts as the most recent one.

    Attributes:
        record_id: The identifier that was returned twice.
    """

    def __init__(self, record_id: Any, operation: str) -> None:
        self.record_id = record_id
        super().__init__(
            f"record {record_id!r} has already been created in this session",
            operation=operation,
        )


class RecordTypeMismatchError(FluentTestingError, TypeError):
    """The last created value is not of the type a by-value creator expects.

    Attributes:
        record_id: Identifier of the last created record.
        expected_type: The parent type the creator declared.
        actual_type: The type of the value actually stored.
    """

    def __init__(self, record_id: Any, expected_type: type, actual_type: type) -> None:
        self.record_id = record_id
        self.expected_type = expected_type
        self.actual_type = actual_type
        super().__init__(
            f"record {record_id!r} is a {actual_type.__name__}, "
            f"expected {expected_type.__name__}"
        )
