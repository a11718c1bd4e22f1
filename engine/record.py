"""Record handle produced by creation steps."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

TEntity = TypeVar("TEntity")
TID = TypeVar("TID")


class Record(BaseModel, Generic[TEntity, TID]):
    """Pairing of a created record's identifier and its value.

    A Record only lives long enough to be merged into a session's
    record map. Creators may also return a plain ``(id, row)`` tuple,
    which the session normalizes through :meth:`coerce`.

    Args:
        id: Identifier assigned by the external system.
        row: The domain object that was created.

    Examples:
        Record[Order, UUID](id=order.id, row=order)
        Record.of(order.id, order)
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    id: TID = Field(description="Identifier assigned by the external system")
    row: TEntity = Field(description="The domain object that was created")

    @classmethod
    def of(cls, id: Any, row: Any) -> "Record":
        """Build a record from positional values."""
        return cls(id=id, row=row)

    @classmethod
    def coerce(cls, value: Any) -> "Record":
        """Normalize a creator's return value into a Record.

        Args:
            value: A Record instance or a two-item ``(id, row)`` tuple.

        Returns:
            The value as a Record.

        Raises:
            TypeError: If the value is neither a Record nor a pair.
        """
        if isinstance(value, Record):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return Record(id=value[0], row=value[1])
        raise TypeError(
            f"creator must return a Record or an (id, row) pair, got {type(value).__name__}"
        )

    def as_tuple(self) -> tuple[Any, Any]:
        return self.id, self.row
