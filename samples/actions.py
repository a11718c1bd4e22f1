"""Actions that change order status in the record store."""

import logging
import uuid

from client import Order, RecordStoreClient
from engine import ExecutableAction, ExecutableAggregateAction

logger = logging.getLogger(__name__)


class CloseOrder(ExecutableAction[Order, uuid.UUID]):
    """Close the most recently created order."""

    def __init__(self, client: RecordStoreClient) -> None:
        self._client = client

    def execute(self, record_id: uuid.UUID) -> None:
        logger.info(f"Closing order {record_id}")
        self._client.orders.close(record_id)


class CancelOrder(ExecutableAggregateAction[Order, uuid.UUID]):
    """Cancel the root order of a scenario."""

    def __init__(self, client: RecordStoreClient) -> None:
        self._client = client

    def execute(self, root_id: uuid.UUID) -> None:
        logger.info(f"Cancelling root order {root_id}")
        self._client.orders.cancel(root_id)
