"""Fail-fast argument checks used by the session before calling collaborators."""

from collections.abc import Mapping
from typing import Any

from engine.exceptions import MissingRecordError, PreconditionError


def against_empty(records: Mapping[Any, Any] | None, operation: str) -> None:
    """Refuse a step that needs a prior record.

    Raises:
        PreconditionError: If the record map is missing entirely.
        MissingRecordError: If no record has been created yet.
    """
    if records is None:
        raise PreconditionError("record map has not been initialized", operation=operation)
    if not records:
        raise MissingRecordError(operation)


def against_negative(value: float, name: str, operation: str) -> None:
    """Refuse a negative quantity such as a delay."""
    if value < 0:
        raise PreconditionError(f"{name} must be >= 0, got {value}", operation=operation)
