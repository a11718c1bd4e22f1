"""Collaborator contracts invoked by the RecordService.

Every step of a session delegates its domain work to one of these
capabilities. Each is a small ABC with a single abstract method, so a
collaborator class states exactly which steps it can serve. The session
also accepts a plain callable with the same signature wherever an
instance is expected.

Capabilities:
- RecordCreator: creates a new (parent) record
- RelatedRecordCreator: creates a record from the last record's id
- RelatedValueRecordCreator: creates a record from the last record's value
- SpecificationValidator: checks exactly one property of a record
- BaseValidator: retrieves a record and runs an ordered list of validators
- ExecutableAction: acts on the most recently created record
- ExecutableAggregateAction: acts on the root record
- RecordCleanup: tears down everything a session created
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, ClassVar, Generic, TypeVar

from engine.record import Record

TEntity = TypeVar("TEntity")
TParent = TypeVar("TParent")
TID = TypeVar("TID")

# A creator may hand back a Record or a bare (id, row) pair
CreatedRecord = Record | tuple[Any, Any]

# Type alias for single-assertion functions
ValidatorFunc = Callable[[Any], None]


class RecordCreator(ABC, Generic[TEntity, TID]):
    """Creates a brand-new record in the external system."""

    @abstractmethod
    def create_record(self) -> CreatedRecord:
        """Create the record and return its identifier and value."""


class RelatedRecordCreator(ABC, Generic[TEntity, TID]):
    """Creates a record that depends on the identifier of the previous one."""

    @abstractmethod
    def create_related_record(self, parent_id: TID) -> CreatedRecord:
        """Create a child record.

        Args:
            parent_id: Identifier of the most recently created record.

        Returns:
            The new record's identifier and value.
        """


class RelatedValueRecordCreator(ABC, Generic[TParent, TEntity, TID]):
    """Creates a record from the materialized value of the previous one.

    Subclasses declare ``parent_type``. The session checks the last
    created value against it before calling :meth:`create_related_record`.

    Example:
        class OrderLineConfiguration(RelatedValueRecordCreator[Order, OrderLine, UUID]):
            parent_type = Order

            def create_related_record(self, parent: Order) -> Record:
                ...
    """

    parent_type: ClassVar[type]

    @abstractmethod
    def create_related_record(self, parent: TParent) -> CreatedRecord:
        """Create a child record from the parent value."""


class SpecificationValidator(ABC, Generic[TEntity]):
    """A single-assertion check against one record value.

    Implementations check one condition only and raise AssertionError
    when it does not hold.
    """

    @abstractmethod
    def validate(self, record: TEntity) -> None:
        """Check the record, raising AssertionError on failure."""


class BaseValidator(ABC, Generic[TID, TEntity]):
    """Composite validator binding a retrieval strategy to ordered checks.

    The record is fetched through :meth:`get_record` once per validation,
    so assertions always see the live state in the external system rather
    than the value captured at creation time. Validators then run in the
    order :meth:`get_validators` returns them and the first failure aborts
    the run.
    """

    @abstractmethod
    def get_record(self, record_id: TID) -> TEntity:
        """Fetch the current state of the record to validate."""

    @abstractmethod
    def get_validators(self) -> Sequence["SpecificationValidator[TEntity] | ValidatorFunc"]:
        """Return the checks to run, in order."""

    def validate(self, record_id: TID) -> None:
        """Retrieve the record and run every validator against it.

        Args:
            record_id: Identifier of the record under test.

        Raises:
            AssertionError: From the first validator that fails.
        """
        record = self.get_record(record_id)
        for validator in self.get_validators():
            check = validator.validate if isinstance(validator, SpecificationValidator) else validator
            check(record)


class Specification(BaseValidator[TID, TEntity]):
    """A BaseValidator assembled from plain callables.

    Args:
        retriever: Callable fetching the live record for an identifier.
        validators: Ordered checks; SpecificationValidator instances or callables.

    Example:
        spec = Specification(
            client.orders.get,
            [MustHaveStatus(OrderStatus.OPEN), lambda order: None],
        )
    """

    def __init__(
        self,
        retriever: Callable[[TID], TEntity],
        validators: Sequence[SpecificationValidator[TEntity] | ValidatorFunc] | None = None,
    ) -> None:
        self._retriever = retriever
        self._validators = list(validators or [])

    def get_record(self, record_id: TID) -> TEntity:
        return self._retriever(record_id)

    def get_validators(self) -> list[SpecificationValidator[TEntity] | ValidatorFunc]:
        return list(self._validators)


class ExecutableAction(ABC, Generic[TEntity, TID]):
    """Side-effecting operation on the most recently created record."""

    @abstractmethod
    def execute(self, record_id: TID) -> None:
        """Apply the action to the record."""


class ExecutableAggregateAction(ABC, Generic[TEntity, TID]):
    """Side-effecting operation on the session's root record."""

    @abstractmethod
    def execute(self, root_id: TID) -> None:
        """Apply the action to the root record."""


class RecordCleanup(ABC, Generic[TID]):
    """Tears down the records a session created."""

    @abstractmethod
    def cleanup(self, records: Mapping[TID, Any], root_id: TID) -> None:
        """Remove records from the external system.

        Args:
            records: Every record created by the session, in creation order.
            root_id: The session's root identifier at cleanup time.
        """
