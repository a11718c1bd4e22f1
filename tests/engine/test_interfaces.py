"""Unit tests for collaborator contracts and engine exceptions."""

import pytest

from engine import (
    BaseValidator,
    DuplicateRecordError,
    FluentTestingError,
    MissingRecordError,
    PreconditionError,
    RecordCreator,
    RecordTypeMismatchError,
    Specification,
    SpecificationValidator,
)
from tests.fixtures.records import FakeSpecification, RecordingValidator


class TestAbstractContracts:
    """Capabilities cannot be used without implementing their method."""

    def test_record_creator_requires_create_record(self):
        class Incomplete(RecordCreator):
            pass

        with pytest.raises(TypeError):
            Incomplete()

    def test_base_validator_requires_both_methods(self):
        class OnlyRetrieval(BaseValidator):
            def get_record(self, record_id):
                return record_id

        with pytest.raises(TypeError):
            OnlyRetrieval()


class TestBaseValidator:
    """Test BaseValidator.validate."""

    def test_mixes_validator_objects_and_callables(self):
        log = []
        spec = FakeSpecification(
            store={"id": 5},
            validators=[RecordingValidator("object", log), lambda value: log.append(value)],
        )

        spec.validate("id")

        assert log == ["object", 5]

    def test_empty_validator_list_still_retrieves(self):
        spec = FakeSpecification(store={"id": 5})
        spec.validate("id")
        assert spec.retrieved == ["id"]


class TestSpecification:
    """Test the callable-backed Specification."""

    def test_runs_checks_against_retrieved_record(self):
        class Positive(SpecificationValidator[int]):
            def validate(self, record: int) -> None:
                assert record > 0, f"{record} is not positive"

        spec = Specification(lambda record_id: record_id * 2, [Positive()])
        spec.validate(3)

        with pytest.raises(AssertionError, match="-4 is not positive"):
            spec.validate(-2)

    def test_get_validators_returns_a_copy(self):
        checks = [lambda value: None]
        spec = Specification(lambda record_id: record_id, checks)

        spec.get_validators().append(lambda value: None)

        assert len(spec.get_validators()) == 1


class TestExceptions:
    """Test the engine exception hierarchy and messages."""

    def test_hierarchy(self):
        assert issubclass(MissingRecordError, PreconditionError)
        assert issubclass(DuplicateRecordError, PreconditionError)
        assert issubclass(PreconditionError, FluentTestingError)
        assert issubclass(RecordTypeMismatchError, FluentTestingError)
        assert issubclass(RecordTypeMismatchError, TypeError)

    def test_missing_record_message_names_operation(self):
        error = MissingRecordError("act")
        assert error.operation == "act"
        assert str(error) == "[act] missing prior record: 'act' requires at least one created record"

    def test_precondition_without_operation(self):
        assert str(PreconditionError("bad state")) == "bad state"

    def test_type_mismatch_message(self):
        error = RecordTypeMismatchError("X1", int, str)
        assert str(error) == "record 'X1' is a str, expected int"
