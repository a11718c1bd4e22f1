"""Teardown of records created during a scenario."""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from client import NotFoundError, Order, OrderLine, RecordStoreClient
from engine import RecordCleanup

logger = logging.getLogger(__name__)


class DeleteCreatedRecords(RecordCleanup[uuid.UUID]):
    """Delete every record a session created, newest first.

    Children are always created after their parents, so walking the
    records backwards removes lines and child orders before the orders
    they hang off. A record that is already gone (for example a line
    removed together with its order) is skipped.

    Args:
        client: Record store client.

    Attributes:
        deleted: Identifiers removed by the last cleanup, in deletion order.
    """

    def __init__(self, client: RecordStoreClient) -> None:
        self._client = client
        self.deleted: list[uuid.UUID] = []

    def cleanup(self, records: Mapping[uuid.UUID, Any], root_id: uuid.UUID) -> None:
        self.deleted = []
        logger.info(f"Cleaning up {len(records)} records for root {root_id}")
        for record_id, row in reversed(list(records.items())):
            try:
                self._delete(record_id, row)
            except NotFoundError:
                logger.info(f"Record {record_id} already removed")
                continue
            self.deleted.append(record_id)

    def _delete(self, record_id: uuid.UUID, row: Any) -> None:
        if isinstance(row, OrderLine):
            self._client.lines.delete(record_id)
        elif isinstance(row, Order):
            self._client.orders.delete(record_id)
        else:
            raise TypeError(f"Don't know how to delete {type(row).__name__} {record_id}")
