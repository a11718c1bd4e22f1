"""Record creators for orders and order lines."""

import logging
import uuid
from typing import Optional

from client import Order, OrderLine, RecordStoreClient
from engine import Record, RecordCreator, RelatedRecordCreator, RelatedValueRecordCreator

logger = logging.getLogger(__name__)


class OrderConfiguration(RecordCreator[Order, uuid.UUID], RelatedRecordCreator[Order, uuid.UUID]):
    """Creates orders, either standalone or as children of the last record.

    Used with ``create`` it makes a new top-level order; used with
    ``create_related`` it makes an order whose parent is the last record.

    Args:
        client: Record store client.
        reference: Fixed reference for created orders; generated by the store if None.
    """

    def __init__(self, client: RecordStoreClient, reference: Optional[str] = None) -> None:
        self._client = client
        self._reference = reference

    def create_record(self) -> Record[Order, uuid.UUID]:
        logger.info("Creating order")
        order = self._client.orders.create(reference=self._reference)
        return Record[Order, uuid.UUID].of(order.id, order)

    def create_related_record(self, parent_id: uuid.UUID) -> Record[Order, uuid.UUID]:
        logger.info(f"Creating related order with parent id {parent_id}")
        order = self._client.orders.create(reference=self._reference, parent_id=parent_id)
        return Record[Order, uuid.UUID].of(order.id, order)


class OrderLineConfiguration(RelatedValueRecordCreator[Order, OrderLine, uuid.UUID]):
    """Adds a line to the order created just before it.

    Args:
        client: Record store client.
        product: Product name or SKU for the line.
        quantity: Number of units.
    """

    parent_type = Order

    def __init__(self, client: RecordStoreClient, product: str, quantity: int = 1) -> None:
        self._client = client
        self._product = product
        self._quantity = quantity

    def create_related_record(self, parent: Order) -> Record[OrderLine, uuid.UUID]:
        logger.info(f"Adding {self._quantity} x {self._product} to order {parent.reference}")
        line = self._client.orders.add_line(parent.id, product=self._product, quantity=self._quantity)
        return Record[OrderLine, uuid.UUID].of(line.id, line)
