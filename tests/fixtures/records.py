"""In-memory collaborators for RecordService tests.

These fakes record every call they receive so tests can check which
identifiers and values the session passed along, and in what order.
"""

from dataclasses import dataclass, field
from typing import Any

import pytest

from engine import (
    BaseValidator,
    ExecutableAction,
    ExecutableAggregateAction,
    Record,
    RecordCleanup,
    RecordCreator,
    RecordService,
    RelatedRecordCreator,
    RelatedValueRecordCreator,
    SpecificationValidator,
)


@dataclass
class Widget:
    """Parent record value used by fake creators."""

    id: str
    name: str = "widget"


@dataclass
class Part:
    """Child record value used by fake creators."""

    id: str
    widget_id: str


class FakeCreator(RecordCreator[Widget, str], RelatedRecordCreator[Widget, str]):
    """Creates Widgets with sequential ids; records parent ids it receives."""

    def __init__(self, prefix: str = "W") -> None:
        self.prefix = prefix
        self.count = 0
        self.parent_ids: list[str] = []

    def _next(self) -> Record[Widget, str]:
        self.count += 1
        widget = Widget(id=f"{self.prefix}{self.count}")
        return Record(id=widget.id, row=widget)

    def create_record(self) -> Record[Widget, str]:
        return self._next()

    def create_related_record(self, parent_id: str) -> Record[Widget, str]:
        self.parent_ids.append(parent_id)
        return self._next()


class FakePartCreator(RelatedValueRecordCreator[Widget, Part, str]):
    """Creates a Part for the Widget value it receives."""

    parent_type = Widget

    def __init__(self) -> None:
        self.parents: list[Widget] = []

    def create_related_record(self, parent: Widget) -> Record[Part, str]:
        self.parents.append(parent)
        part = Part(id=f"P{len(self.parents)}", widget_id=parent.id)
        return Record(id=part.id, row=part)


class FakeAction(ExecutableAction[Widget, str], ExecutableAggregateAction[Widget, str]):
    """Records the ids it was executed against."""

    def __init__(self) -> None:
        self.executed: list[str] = []

    def execute(self, record_id: str) -> None:
        self.executed.append(record_id)


class FakeCleanup(RecordCleanup[str]):
    """Captures the records and root id handed to it."""

    def __init__(self) -> None:
        self.calls: list[tuple[dict[str, Any], str]] = []

    def cleanup(self, records, root_id: str) -> None:
        self.calls.append((dict(records), root_id))


class RecordingValidator(SpecificationValidator[Any]):
    """Single check that logs its name to a shared list, optionally failing."""

    def __init__(self, name: str, log: list[str], fail: bool = False) -> None:
        self.name = name
        self.log = log
        self.fail = fail

    def validate(self, record: Any) -> None:
        self.log.append(self.name)
        assert not self.fail, f"{self.name} failed for {record!r}"


@dataclass
class FakeSpecification(BaseValidator[str, Any]):
    """Specification over a dict-backed store, counting retrievals."""

    store: dict[str, Any]
    validators: list[Any] = field(default_factory=list)
    retrieved: list[str] = field(default_factory=list)

    def get_record(self, record_id: str) -> Any:
        self.retrieved.append(record_id)
        return self.store[record_id]

    def get_validators(self) -> list[Any]:
        return self.validators


def create_record_service(root_id: str = "R0") -> RecordService[str]:
    """Create an empty RecordService with a known root id."""
    return RecordService(root_id)


@pytest.fixture
def record_service():
    """Provide an empty RecordService rooted at "R0"."""
    return create_record_service()


@pytest.fixture
def creator():
    return FakeCreator()


@pytest.fixture
def part_creator():
    return FakePartCreator()


@pytest.fixture
def action():
    return FakeAction()


@pytest.fixture
def cleaner():
    return FakeCleanup()
