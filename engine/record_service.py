"""Fluent record service for orchestrating multi-step test scenarios.

A RecordService tracks every record created during one test scenario and
exposes a chainable vocabulary of steps (create, relate, act, assert,
delay, cleanup). Identifiers flow between steps through the service, so
test code never threads them by hand.

Example:
    (
        RecordService(root_id=None)
        .create(OrderConfiguration(client))
        .create_related_from_value(OrderLineConfiguration(client, "widget"))
        .conditional(close_first, lambda s: s.act_on_root(CloseOrder(client)))
        .delay(settings.settle_ms)
        .assert_against(MustBeOpen(client))
        .cleanup(DeleteCreatedRecords(client))
    )
"""

import logging
import time
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from engine import guard
from engine.exceptions import (
    DuplicateRecordError,
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
)
from engine.record import Record

TID = TypeVar("TID")

logger = logging.getLogger(__name__)


def _resolve(collaborator: Any, interface: type, method: str, operation: str) -> Callable[..., Any]:
    """Return the bound capability method, or the collaborator itself if callable."""
    if isinstance(collaborator, interface):
        return getattr(collaborator, method)
    if callable(collaborator):
        return collaborator
    raise TypeError(
        f"{operation} expects a {interface.__name__} or a callable, "
        f"got {type(collaborator).__name__}"
    )


class RecordService(Generic[TID]):
    """Tracks all records created during a testing session.

    The service keeps an insertion-ordered map of created records and a
    root (aggregate) identifier. The most recently inserted record feeds
    related-record creation and ``act``; the root feeds assertions,
    ``act_on_root`` and cleanup. The root is read when those steps run,
    not when the service is built, so ``reassign_root`` affects every
    later step.

    Every step returns the service so calls chain left to right. Steps
    that need a prior record fail before touching any collaborator;
    exceptions raised by collaborators propagate unchanged.

    Args:
        root_id: Initial root identifier for the scenario.

    Attributes:
        records: Read-only view of created records, in creation order.
        root_id: Current root identifier.
    """

    def __init__(self, root_id: TID) -> None:
        self._records: dict[TID, Any] = {}
        self._root_id = root_id

    # ===== State Access =====

    @property
    def records(self) -> Mapping[TID, Any]:
        """Created records keyed by identifier, oldest first."""
        return MappingProxyType(self._records)

    @property
    def root_id(self) -> TID:
        return self._root_id

    @property
    def last_id(self) -> TID:
        """Identifier of the most recently created record.

        Raises:
            MissingRecordError: If nothing has been created yet.
        """
        guard.against_empty(self._records, "last_id")
        return next(reversed(self._records))

    @property
    def last_record(self) -> Any:
        """Value of the most recently created record."""
        return self._records[self.last_id]

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._records

    def __repr__(self) -> str:
        return f"RecordService(root_id={self._root_id!r}, records={list(self._records)!r})"

    # ===== Creation Steps =====

    def create(self, creator: RecordCreator | Callable[[], Any]) -> "RecordService[TID]":
        """Create a parent record and track its identifier.

        Args:
            creator: RecordCreator, or a callable taking no arguments,
                returning a Record or an ``(id, row)`` pair.

        Returns:
            This service, for chaining.
        """
        create_record = _resolve(creator, RecordCreator, "create_record", "create")
        record = Record.coerce(create_record())
        self._add(record, "create")
        return self

    def create_related(
        self, creator: RelatedRecordCreator | Callable[[Any], Any]
    ) -> "RecordService[TID]":
        """Create a record from the identifier of the previous record.

        Args:
            creator: RelatedRecordCreator, or a callable taking the parent id.

        Returns:
            This service, for chaining.

        Raises:
            MissingRecordError: If no record has been created yet.
        """
        guard.against_empty(self._records, "create_related")
        create_record = _resolve(
            creator, RelatedRecordCreator, "create_related_record", "create_related"
        )
        parent_id = self.last_id
        logger.debug(f"Creating record related to {parent_id!r}")
        record = Record.coerce(create_record(parent_id))
        self._add(record, "create_related")
        return self

    def create_related_from_value(
        self,
        creator: RelatedValueRecordCreator | Callable[[Any], Any],
        parent_type: type | None = None,
    ) -> "RecordService[TID]":
        """Create a record from the value of the previous record.

        The last created value must be an instance of the creator's
        ``parent_type``. Plain callables carry no such attribute, so the
        type is passed explicitly with ``parent_type``.

        Args:
            creator: RelatedValueRecordCreator, or a callable taking the parent value.
            parent_type: Expected parent type; overrides ``creator.parent_type``.

        Returns:
            This service, for chaining.

        Raises:
            MissingRecordError: If no record has been created yet.
            PreconditionError: If no parent type is known.
            RecordTypeMismatchError: If the last value has the wrong type.
        """
        operation = "create_related_from_value"
        guard.against_empty(self._records, operation)
        expected = parent_type or getattr(creator, "parent_type", None)
        if expected is None:
            raise PreconditionError(
                "parent_type must be declared on the creator or passed explicitly",
                operation=operation,
            )

        parent_id = self.last_id
        parent = self._records[parent_id]
        if not isinstance(parent, expected):
            raise RecordTypeMismatchError(parent_id, expected, type(parent))

        create_record = _resolve(
            creator, RelatedValueRecordCreator, "create_related_record", operation
        )
        record = Record.coerce(create_record(parent))
        self._add(record, operation)
        return self

    # ===== Flow Control =====

    def conditional(
        self,
        condition: bool,
        branch: Callable[["RecordService[TID]"], "RecordService[TID]"],
    ) -> "RecordService[TID]":
        """Run ``branch`` only when ``condition`` is true.

        The condition is evaluated by the caller before this call, so any
        side effects in computing it happen once whichever way it goes.

        Returns:
            The branch's result when the condition holds, otherwise this service.
        """
        if condition:
            logger.debug("Condition met, running branch")
            return branch(self)
        logger.debug("Condition not met, skipping branch")
        return self

    def delay(self, milliseconds: int) -> "RecordService[TID]":
        """Block the scenario for a fixed time.

        Used to let an eventually consistent system settle between
        steps. The wait is not adaptive and nothing is polled.

        Args:
            milliseconds: Time to wait, in milliseconds.

        Raises:
            PreconditionError: If the duration is negative.
        """
        guard.against_negative(milliseconds, "milliseconds", "delay")
        logger.debug(f"Delaying scenario for {milliseconds}ms")
        time.sleep(milliseconds / 1000)
        return self

    def reassign_root(self) -> "RecordService[TID]":
        """Make the most recently created record the root.

        Raises:
            MissingRecordError: If no record has been created yet.
        """
        guard.against_empty(self._records, "reassign_root")
        self._root_id = self.last_id
        logger.debug(f"Root reassigned to {self._root_id!r}")
        return self

    # ===== Actions =====

    def act(self, action: ExecutableAction | Callable[[Any], None]) -> "RecordService[TID]":
        """Execute an action against the most recently created record.

        Raises:
            MissingRecordError: If no record has been created yet.
        """
        guard.against_empty(self._records, "act")
        execute = _resolve(action, ExecutableAction, "execute", "act")
        record_id = self.last_id
        logger.debug(f"Executing action on {record_id!r}")
        execute(record_id)
        return self

    def act_on_root(
        self, action: ExecutableAggregateAction | Callable[[Any], None]
    ) -> "RecordService[TID]":
        """Execute an action against the root record."""
        execute = _resolve(action, ExecutableAggregateAction, "execute", "act_on_root")
        logger.debug(f"Executing action on root {self._root_id!r}")
        execute(self._root_id)
        return self

    # ===== Terminal Steps =====

    def assert_against(self, specification: BaseValidator) -> "RecordService[TID]":
        """Validate the live state of the root record.

        The specification retrieves the root record once and runs its
        validators in order; the first AssertionError ends the scenario.

        Args:
            specification: Composite validator for the root record's type.

        Returns:
            This service, for chaining.
        """
        if not isinstance(specification, BaseValidator):
            raise TypeError(
                f"assert_against expects a BaseValidator, got {type(specification).__name__}"
            )
        logger.debug(
            f"Asserting {type(specification).__name__} against root {self._root_id!r}"
        )
        specification.validate(self._root_id)
        return self

    def cleanup(
        self, cleaner: RecordCleanup | Callable[[Mapping[Any, Any], Any], None]
    ) -> "RecordService[TID]":
        """Hand every created record and the root to a cleanup collaborator.

        The service deletes nothing itself.

        Returns:
            This service, for chaining.
        """
        run_cleanup = _resolve(cleaner, RecordCleanup, "cleanup", "cleanup")
        logger.debug(f"Cleaning up {len(self._records)} records (root {self._root_id!r})")
        run_cleanup(self.records, self._root_id)
        return self

    # ===== Internal =====

    def _add(self, record: Record, operation: str) -> None:
        record_id, row = record.as_tuple()
        if record_id in self._records:
            raise DuplicateRecordError(record_id, operation)
        self._records[record_id] = row
        logger.debug(f"{operation}: tracked record {record_id!r}")
